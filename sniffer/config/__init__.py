from .config_loader import DEFAULT_CONFIG_PATH, load_yaml_config, load_server_config

__all__ = ['DEFAULT_CONFIG_PATH', 'load_yaml_config', 'load_server_config']
