import os
import yaml

from loco_mcp.core.errors import ConfigError

CONFIG_ENV_VAR = "LOCO_MCP_CONFIG"


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads configuration from YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._load_config()
            cls._instance = super(ConfigLoader, cls).__new__(cls)
        return cls._instance

    @classmethod
    def _config_path(cls) -> str:
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return os.path.abspath(override)
        return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "config.yaml"))

    @classmethod
    def _load_config(cls):
        """
        Load the configuration from the YAML file into the class variable _config.
        """
        config_path = cls._config_path()
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                cls._config = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {config_path}") from e

    @classmethod
    def reload(cls):
        """Drop the cached configuration so the next access re-reads the file."""
        cls._instance = None
        cls._config = None

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()
