# vector_math.py

import math
from collections import namedtuple
import numba

# An immutable 2D vector, used for rotated velocities and ad-hoc deltas.
Vector2 = namedtuple('Vector2', ['x', 'y'])

@numba.jit(nopython=True)
def _rotate_jit(x, y, angle):
    """Rotates (x, y) by angle radians. Shared by the collision kernel."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a

def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    x_dist = x2 - x1
    y_dist = y2 - y1
    return math.sqrt(x_dist * x_dist + y_dist * y_dist)

def rotate(velocity, angle: float) -> Vector2:
    """
    Rotates a 2D vector by `angle` radians using the standard rotation matrix.

    - Inputs:
        - velocity: Any 2-sequence (Vector2, tuple or NumPy array).
        - angle (float): Rotation in radians, counter-clockwise.
    - Outputs: A new Vector2. The input is not modified.
    """
    x, y = _rotate_jit(float(velocity[0]), float(velocity[1]), float(angle))
    return Vector2(x, y)
