import pytest
from particle_system import SimulationContext

@pytest.fixture
def far_context():
    """A large region with the pointer parked far from everything."""
    return SimulationContext(10000, 10000, pointer=(-5000, -5000))

class RecordingSink:
    def __init__(self):
        self.calls = []

    def __call__(self, center, radius, fill_color, stroke_color, opacity):
        self.calls.append((center, radius, fill_color, stroke_color, opacity))

@pytest.fixture
def sink():
    return RecordingSink()
