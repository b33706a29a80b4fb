import toml
import os
from .cli_logger import logger

CONFIG_FILE = "appcore.toml"

def load_config(path="."):
    """Read appcore.toml from path; a missing or unreadable file means no overrides."""
    config_path = os.path.join(path, CONFIG_FILE)
    if not os.path.exists(config_path):
        return {}
    logger.debug(f"Loading configuration from {config_path}")
    try:
        with open(config_path, "r") as f:
            return toml.load(f)
    except toml.TomlDecodeError as e:
        logger.error(f"Error decoding {config_path}, ignoring it: {e}")
    except IOError as e:
        logger.error(f"Error reading {config_path}, ignoring it: {e}")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        return False
