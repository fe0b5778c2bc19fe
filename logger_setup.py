# logger_setup.py

import logging
import os
import json
import constants

def load_config(config_path='config.json'):
    """Loads the JSON configuration file. Errors are logged and re-raised."""
    logger = logging.getLogger(constants.LOGGER_NAME)
    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logger.error(f"Configuration file not found at {config_path}.")
        raise
    except json.JSONDecodeError:
        logger.error(f"Error decoding JSON from {config_path}.")
        raise
    return config

def setup_logging(config, runs_dir='runs'):
    """
    Sets up logging for the application.

    Creates a run-specific log directory and configures a dedicated
    application logger (not the root logger) to output to both the console
    and a log file. This keeps pygame and Numba chatter out of the run log.

    Data Contract:
    - Inputs:
        - config (dict): The loaded configuration. Must contain 'run_id' and a
          'logging' dictionary with 'level' and 'format'.
        - runs_dir (str): Parent directory for per-run log directories.
    - Outputs: The configured logging.Logger.
    - Side Effects:
        - Configures the "collision_sim" logger.
        - Creates directories for log files.
    """
    run_id = config['run_id']
    log_config = config['logging']

    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(log_config['level'])
    logger.propagate = False

    log_dir = os.path.join(runs_dir, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'simulation.log')

    formatter = logging.Formatter(log_config['format'])

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
