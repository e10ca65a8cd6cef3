import json
import os
from datetime import datetime

from rich import print

DEFAULT_CONFIG = {
    "max_steps": 0,
    "visualize": False,
    "visualize_window": 10,
    "cpu_cores": 1,
    "log_results": True,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "visualize": bool,
    "visualize_window": int,
    "cpu_cores": int,
    "log_results": bool,
    "output_directory": str,
    "log_file_prefix": str,
}


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int; don't let True pass as a step count
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] < 0:
        raise ValueError("max_steps must be >= 0 (0 means unbounded).")
    if config["visualize_window"] < 0:
        raise ValueError("visualize_window must be >= 0.")
    if config["cpu_cores"] < 1:
        raise ValueError("cpu_cores must be at least 1.")


def load_config(path="config/runtime_config.json", verbose=False):
    config = DEFAULT_CONFIG.copy()

    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        # Merge defaults with overrides
        config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config


def save_config(config, path="config/runtime_config.json"):
    validate_config(config)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
