import numpy as np
import pytest
import constants
import particle as particle_module
from particle import Particle
from particle_system import SimulationContext

def test_boundary_reflection_past_left_wall(far_context):
    radius = 30
    p = Particle((radius - 1, 5000), (-2, 0), radius, "#4285F4")

    p.update([p], far_context)

    assert p.velocity[0] == 2
    assert p.position[0] == pytest.approx(radius + 1)

def test_boundary_reflection_on_each_axis():
    context = SimulationContext(200, 100, pointer=(-1000, -1000))
    right = Particle((190, 50), (3, 0.5), 10, "#4285F4")
    bottom = Particle((100, 95), (0.5, 1), 10, "#4285F4")

    right.check_boundary_collision(context.width, context.height)
    bottom.check_boundary_collision(context.width, context.height)

    np.testing.assert_array_equal(right.velocity, [-3, 0.5])
    np.testing.assert_array_equal(bottom.velocity, [0.5, -1])

def test_touching_the_wall_counts_as_contact():
    p = Particle((10, 50), (-1, 0), 10, "#4285F4")

    p.check_boundary_collision(200, 100)

    assert p.velocity[0] == 1

def test_interior_particle_keeps_velocity(far_context):
    p = Particle((500, 500), (1.5, -0.5), 30, "#4285F4")

    p.update([p], far_context)

    np.testing.assert_array_equal(p.velocity, [1.5, -0.5])
    np.testing.assert_array_equal(p.position, [501.5, 499.5])

def test_corner_reflects_both_axes_once(far_context):
    p = Particle((5, 5), (-1, -2), 10, "#4285F4")

    p.check_boundary_collision(far_context.width, far_context.height)

    np.testing.assert_array_equal(p.velocity, [1, 2])

def test_opacity_grows_to_cap_and_never_exceeds_it():
    context = SimulationContext(1000, 1000, pointer=(500, 500))
    p = Particle((500, 500), (0, 0), 30, "#4285F4")

    seen = []
    for _ in range(50):
        p.update([p], context)
        seen.append(p.opacity)

    assert all(0.0 <= o <= constants.OPACITY_MAX for o in seen)
    assert max(seen) == constants.OPACITY_MAX
    assert seen[0] == pytest.approx(constants.OPACITY_STEP_UP)

def test_opacity_decays_to_exactly_zero(far_context):
    p = Particle((500, 500), (0, 0), 30, "#4285F4")
    p.opacity = constants.OPACITY_MAX

    for _ in range(30):
        p.update([p], far_context)
        assert p.opacity >= 0.0

    assert p.opacity == 0.0

def test_pointer_threshold_is_strict():
    p = Particle((500, 500), (0, 0), 30, "#4285F4")

    p.update_opacity(500 + constants.POINTER_RADIUS, 500)
    assert p.opacity == 0.0

    p.update_opacity(500 + constants.POINTER_RADIUS - 1, 500)
    assert p.opacity == pytest.approx(constants.OPACITY_STEP_UP)

def test_update_resolves_overlapping_pair(far_context):
    a = Particle((100, 100), (1, 0), 30, "#4285F4")
    b = Particle((159, 100), (-1, 0), 30, "#EA4335")

    a.update([a, b], far_context)

    np.testing.assert_allclose(a.velocity, [-1, 0], atol=1e-12)
    np.testing.assert_allclose(b.velocity, [1, 0], atol=1e-12)
    np.testing.assert_allclose(a.position, [99, 100])
    np.testing.assert_array_equal(b.position, [159, 100])

def test_resolver_not_called_for_separated_particles(far_context, monkeypatch):
    calls = []
    monkeypatch.setattr(particle_module, "resolve_collision", lambda a, b: calls.append((a, b)))
    a = Particle((100, 100), (1, 0), 30, "#4285F4")
    touching = Particle((160, 100), (-1, 0), 30, "#4285F4")
    far = Particle((400, 400), (0, 0), 30, "#4285F4")

    a.update([a, touching, far], far_context)

    assert calls == []

def test_resolver_called_once_per_overlapping_neighbour(far_context, monkeypatch):
    calls = []
    monkeypatch.setattr(particle_module, "resolve_collision", lambda a, b: calls.append((a, b)))
    a = Particle((100, 100), (0, 0), 30, "#4285F4")
    left = Particle((45, 100), (0, 0), 30, "#4285F4")
    right = Particle((155, 100), (0, 0), 30, "#4285F4")
    far = Particle((400, 400), (0, 0), 30, "#4285F4")

    a.update([left, a, right, far], far_context)

    assert calls == [(a, left), (a, right)]

def test_update_draws_before_moving(sink):
    context = SimulationContext(1000, 1000, pointer=(0, 0), draw=sink)
    p = Particle((500, 400), (2, 3), 30, "#34A853")
    p.opacity = 0.2

    p.update([p], context)

    assert sink.calls == [((500.0, 400.0), 30.0, "#34A853", "#34A853", 0.2)]

def test_detached_sink_receives_nothing(sink):
    context = SimulationContext(1000, 1000, pointer=(0, 0), draw=sink)
    p = Particle((500, 400), (0, 0), 30, "#34A853")

    p.update([p], context)
    context.draw = None
    p.update([p], context)

    assert len(sink.calls) == 1
