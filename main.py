# main.py

import io
import logging
import cProfile, pstats
import numpy as np
import pygame
import constants
import logger_setup
from particle_system import ParticleSystem, SimulationContext
from renderer import PygameRenderer

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)

def handle_events(context: SimulationContext) -> bool:
    """
    Applies pending window events to the simulation context.
    Returns False once the window has been closed.
    """
    running = True
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.MOUSEMOTION:
            context.move_pointer(*event.pos)
        elif event.type == pygame.VIDEORESIZE:
            context.resize(event.w, event.h)
    return running

def run_simulation_loop(particle_system, screen, clock, run_control):
    """
    Drives the simulation: one tick per frame, capped at constants.FPS.
    Runs until the window is closed or max_ticks is reached (0 = no cap).
    A log_throttle_ticks of 0 turns the periodic diagnostics off.
    """
    max_ticks = run_control.get('max_ticks', 0)
    log_throttle = run_control.get('log_throttle_ticks', 300)
    context = particle_system.context

    running = True
    while running:
        running = handle_events(context)

        screen.fill(constants.BACKGROUND_COLOR)
        particle_system.update()
        pygame.display.flip()
        clock.tick(constants.FPS)

        tick = particle_system.tick
        if log_throttle and tick % log_throttle == 0:
            momentum = particle_system.get_total_momentum()
            logger.debug(
                f"Tick={tick}, "
                f"Kinetic={particle_system.get_total_kinetic_energy():.4f}, "
                f"Momentum=({momentum[0]:+.4f}, {momentum[1]:+.4f}), "
                f"MeanOpacity={particle_system.get_mean_opacity():.3f}, "
                f"FPS={clock.get_fps():.1f}"
            )

        if max_ticks and tick >= max_ticks:
            logger.info(f"Reached max_ticks ({max_ticks}). Stopping simulation.")
            running = False

def main():
    """
    Main function to initialize and run the particle simulation.
    """
    # --- Setup ---
    config = logger_setup.load_config('config.json')
    logger_setup.setup_logging(config)
    sim_config = config['simulation']
    run_control = config.get('run_control', {})

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    width, height = screen.get_size()
    context = SimulationContext(width, height, draw=PygameRenderer(screen))
    particle_system = ParticleSystem(
        num_particles=sim_config['particle_count'],
        config=sim_config,
        rng=rng,
        context=context
    )

    if run_control.get('profile', False):
        profiler = cProfile.Profile()
        profiler.enable()
        run_simulation_loop(particle_system, screen, clock, run_control)
        profiler.disable()

        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logger.info(f"Profiling complete.\n{s.getvalue()}")
    else:
        run_simulation_loop(particle_system, screen, clock, run_control)

    logger.info("Application shutting down.")
    pygame.quit()

if __name__ == "__main__":
    main()
