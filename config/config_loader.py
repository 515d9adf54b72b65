import json
import os
from datetime import datetime

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "auto": False,
    "delay": 0.5,
    "max_steps": 10_000,
    "log_runs": True,
    "log_snapshots": False,
    "output_directory": "logs/",
    "log_file_prefix": "tmsim_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "auto": bool,
    "delay": (int, float),
    "max_steps": int,
    "log_runs": bool,
    "log_snapshots": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; only accept it where a bool is expected
        value = config[key]
        if not isinstance(value, expected_type) or (expected_type is not bool and isinstance(value, bool)):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    if config["delay"] < 0:
        raise ValueError("Config key 'delay' must not be negative.")
    if config["max_steps"] < 0:
        raise ValueError("Config key 'max_steps' must not be negative (0 disables the limit).")

def load_config(path=DEFAULT_CONFIG_PATH, verbose=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    # Validate output directory
    if config["log_runs"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
