import logging
import os
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# config/app_config.yaml at the project root
DEFAULT_CONFIG_PATH = os.path.abspath(
    os.path.join(os.path.dirname(__file__), '../../config/app_config.yaml')
)

# (section, key) in the YAML file -> Flask config key
_KEY_MAP = {
    ('server', 'host'): 'HOST',
    ('server', 'port'): 'PORT',
    ('server', 'debug'): 'DEBUG',
    ('server', 'static_dir'): 'STATIC_DIR',
    ('server', 'max_content_length'): 'MAX_CONTENT_LENGTH',
    ('retention', 'max_packets'): 'MAX_RETAINED',
    ('retention', 'floor_packets'): 'RETAINED_FLOOR',
    ('stats', 'top_n'): 'TOP_N',
    ('stats', 'default_packet_limit'): 'DEFAULT_PACKET_LIMIT',
    ('logging', 'directory'): 'LOG_DIR',
    ('logging', 'file'): 'LOG_FILE',
}


def load_yaml_config(config_path: str) -> Optional[Dict[str, Any]]:
    """
    Load a YAML configuration file.

    Args:
        config_path (str): Path to the YAML configuration file.
    Returns:
        dict: Parsed configuration, or None if missing or invalid.
    """
    try:
        with open(config_path, 'r') as file:
            config_data = yaml.safe_load(file)
    except FileNotFoundError:
        logger.debug(f"Configuration file not found: {config_path}")
        return None
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file {config_path}: {e}")
        return None

    if config_data is not None and not isinstance(config_data, dict):
        logger.error(f"Ignoring {config_path}: top level must be a mapping")
        return None
    return config_data or {}


def load_server_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read server settings from app_config.yaml as Flask config keys.

    Returns:
        dict such as {'PORT': 8080, 'MAX_RETAINED': 5000}; empty when
        the file is missing or unreadable
    """
    path = config_path or DEFAULT_CONFIG_PATH
    config = load_yaml_config(path)
    if not config:
        return {}

    settings = {}
    for (section, key), flask_key in _KEY_MAP.items():
        values = config.get(section)
        if isinstance(values, dict) and key in values:
            settings[flask_key] = values[key]

    logger.info(f"Configuration loaded from {path}")
    return settings
