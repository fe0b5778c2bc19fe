# collision.py

import math
import numba
from vector_math import _rotate_jit

# --- JIT-Compiled Collision Kernel ---
# Operates on plain floats only, as required by Numba's nopython mode.
# The Particle objects are unpacked and written back by resolve_collision.

@numba.jit(nopython=True)
def _elastic_collision_jit(p1x, p1y, v1x, v1y, m1, p2x, p2y, v2x, v2y, m2):
    """
    Elastic collision between two discs, solved in the frame where the line
    of centers is the x-axis.

    Returns (resolved, v1x', v1y', v2x', v2y'). When the pair is already
    separating, resolved is False and the input velocities are returned.
    """
    x_velocity_diff = v1x - v2x
    y_velocity_diff = v1y - v2y
    x_dist = p2x - p1x
    y_dist = p2y - p1y

    if x_velocity_diff * x_dist + y_velocity_diff * y_dist < 0:
        return False, v1x, v1y, v2x, v2y

    angle = -math.atan2(y_dist, x_dist)

    # Into the collision frame
    u1x, u1y = _rotate_jit(v1x, v1y, angle)
    u2x, u2y = _rotate_jit(v2x, v2y, angle)

    # 1D elastic collision along the normal; tangential components are kept.
    total_mass = m1 + m2
    w1x = (u1x * (m1 - m2) + 2.0 * m2 * u2x) / total_mass
    w2x = (u2x * (m2 - m1) + 2.0 * m1 * u1x) / total_mass

    # Back to the world frame
    f1x, f1y = _rotate_jit(w1x, u1y, -angle)
    f2x, f2y = _rotate_jit(w2x, u2y, -angle)
    return True, f1x, f1y, f2x, f2y

def resolve_collision(particle, other_particle) -> bool:
    """
    Resolves an elastic collision between two overlapping particles.

    Data Contract:
    - Inputs: Two distinct particles whose discs overlap, as decided by the caller.
    - Outputs: True if velocities were exchanged, False if the pair was
      already moving apart and nothing changed. Callers in the tick ignore
      it; it is there for diagnostics and tests.
    - Side Effects: Writes both particles' velocity arrays in place.
    - Invariants: Total momentum and kinetic energy of the pair are conserved.
    """
    resolved, v1x, v1y, v2x, v2y = _elastic_collision_jit(
        float(particle.position[0]), float(particle.position[1]),
        float(particle.velocity[0]), float(particle.velocity[1]),
        float(particle.mass),
        float(other_particle.position[0]), float(other_particle.position[1]),
        float(other_particle.velocity[0]), float(other_particle.velocity[1]),
        float(other_particle.mass)
    )
    if resolved:
        particle.velocity[0] = v1x
        particle.velocity[1] = v1y
        other_particle.velocity[0] = v2x
        other_particle.velocity[1] = v2y
    return resolved
