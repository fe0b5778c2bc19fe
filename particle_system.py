# particle_system.py

import math
import logging
import numpy as np
import numba
import constants
from particle import Particle

logger = logging.getLogger(constants.LOGGER_NAME)

class PlacementError(ValueError):
    """Raised when the requested particles cannot be placed without overlap."""
    def __init__(self, count: int, radius: float, bounds: tuple, placed: int = 0):
        self.count = count
        self.radius = radius
        self.bounds = tuple(bounds)
        self.placed = placed
        super().__init__(
            f"Cannot place {count} non-overlapping particles of radius {radius} "
            f"in bounds {self.bounds[0]}x{self.bounds[1]} "
            f"(placed {placed} before giving up)."
        )

class SimulationContext:
    """
    Everything a tick reads from the outside world.

    Data Contract:
    - width, height (float): Size of the bounding region. Updated on resize.
    - pointer_x, pointer_y (float): Pointer position. Defaults to the center
      of the region and is updated on pointer motion.
    - draw (callable or None): Drawing sink called once per particle per tick
      as draw(center, radius, fill_color, stroke_color, opacity).
    - Invariants: Mutated only between ticks by the driver's event handling.
    """
    def __init__(self, width: float, height: float, pointer=None, draw=None):
        self.width = float(width)
        self.height = float(height)
        if pointer is None:
            pointer = (self.width / 2, self.height / 2)
        self.pointer_x = float(pointer[0])
        self.pointer_y = float(pointer[1])
        self.draw = draw

    @property
    def bounds(self) -> tuple:
        return (self.width, self.height)

    def resize(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)
        logger.debug(f"Bounds resized to {self.width:.0f}x{self.height:.0f}.")

    def move_pointer(self, x: float, y: float):
        self.pointer_x = float(x)
        self.pointer_y = float(y)

# --- JIT-Compiled Placement Test ---

@numba.jit(nopython=True)
def _overlaps_any_jit(x, y, placed_positions, num_placed, min_distance):
    """
    True if a disc centered at (x, y) overlaps any of the first num_placed
    discs, using the same distance test as runtime collision detection.
    """
    for j in range(num_placed):
        x_dist = placed_positions[j, 0] - x
        y_dist = placed_positions[j, 1] - y
        if math.sqrt(x_dist * x_dist + y_dist * y_dist) - min_distance < 0:
            return True
    return False

def create_particles(count: int, radius: float, palette, bounds: tuple, rng: np.random.Generator,
                     mass: float = 1.0, max_attempts: int = constants.DEFAULT_MAX_PLACEMENT_ATTEMPTS):
    """
    Builds a population of non-overlapping particles by rejection sampling.

    Data Contract:
    - Inputs:
        - count (int): Number of particles to create.
        - radius (float): Radius shared by every particle.
        - palette (sequence): Non-empty collection of color identifiers.
        - bounds (tuple): The (width, height) of the simulation area.
        - rng (np.random.Generator): Source of all randomness.
        - mass (float): Mass shared by every particle.
        - max_attempts (int): Samples tried per particle before giving up.
    - Outputs: A list of `count` Particle objects.
    - Side Effects: Consumes random numbers from rng.
    - Invariants: Every pair of returned particles has center distance of at
      least 2 * radius. Centers lie on integer coordinates in
      [radius, dimension - radius].
    - Raises: PlacementError if a particle cannot be placed, ValueError for
      an empty palette, a negative count or a non-positive radius.
    """
    if count < 0:
        raise ValueError(f"Particle count must be non-negative, got {count}.")
    if radius <= 0:
        raise ValueError(f"Particle radius must be positive, got {radius}.")
    if len(palette) == 0:
        raise ValueError("Color palette must not be empty.")

    width, height = bounds
    low = int(math.ceil(radius))
    high_x = int(math.floor(width - radius))
    high_y = int(math.floor(height - radius))
    if count > 0 and (high_x < low or high_y < low):
        logger.error(f"Bounds {width}x{height} cannot hold a single particle of radius {radius}.")
        raise PlacementError(count, radius, bounds)

    placed_positions = np.zeros((count, 2), dtype=np.float64)
    min_distance = 2.0 * radius
    particles = []
    total_rejections = 0

    for i in range(count):
        color = palette[int(rng.integers(len(palette)))]
        for _ in range(max_attempts):
            x = float(rng.integers(low, high_x, endpoint=True))
            y = float(rng.integers(low, high_y, endpoint=True))
            if not _overlaps_any_jit(x, y, placed_positions, i, min_distance):
                break
            total_rejections += 1
        else:
            logger.error(f"Placement gave up on particle {i} after {max_attempts} attempts.")
            raise PlacementError(count, radius, bounds, placed=i)

        placed_positions[i] = (x, y)
        velocity = rng.uniform(-constants.MAX_INITIAL_SPEED, constants.MAX_INITIAL_SPEED, 2)
        particles.append(Particle((x, y), velocity, radius, color, mass=mass))

    logger.debug(f"Placed {count} particles with {total_rejections} rejected samples.")
    return particles

class ParticleSystem:
    """
    Owns the particle collection and advances it one tick at a time.

    Data Contract:
    - Inputs:
        - num_particles (int): The number of particles to simulate.
        - config (dict): The 'simulation' section of the config file.
        - rng (np.random.Generator): The master seeded random number generator.
        - context (SimulationContext): Bounds, pointer and drawing sink.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Manages the lifecycle of all particles.
    - Invariants: The number of particles is constant throughout the simulation.

    Particles are updated one after another against the same list, so a
    particle sees neighbours that have already moved this tick as well as
    ones that have not. This ordering is part of the simulation's behavior.
    """
    def __init__(self, num_particles: int, config: dict, rng: np.random.Generator, context: SimulationContext):
        self.num_particles = num_particles
        self.config = config
        self.context = context
        self.tick = 0

        palette = config.get('palette', constants.DEFAULT_PALETTE)
        if isinstance(palette, str):
            palette = constants.PALETTES[palette]
        self.palette = list(palette)

        self.particles = create_particles(
            num_particles,
            config['particle_radius'],
            self.palette,
            context.bounds,
            rng,
            mass=config.get('particle_mass', 1.0),
            max_attempts=config.get('max_placement_attempts', constants.DEFAULT_MAX_PLACEMENT_ATTEMPTS)
        )

        logger.info(f"ParticleSystem created for {num_particles} particles of radius {config['particle_radius']}.")

    def update(self):
        """Runs one simulation tick over every particle, in list order."""
        for particle in self.particles:
            particle.update(self.particles, self.context)
        self.tick += 1

    def get_total_kinetic_energy(self) -> float:
        """
        Calculates the total kinetic energy of the system.
        KE = sum(0.5 * m * v^2)
        """
        return float(sum(0.5 * p.mass * np.dot(p.velocity, p.velocity) for p in self.particles))

    def get_total_momentum(self) -> np.ndarray:
        """Vector sum of m * v over all particles."""
        momentum = np.zeros(2, dtype=np.float64)
        for p in self.particles:
            momentum += p.mass * p.velocity
        return momentum

    def get_mean_opacity(self) -> float:
        if not self.particles:
            return 0.0
        return float(np.mean([p.opacity for p in self.particles]))
