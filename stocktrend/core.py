import yaml
import logging
import logging.config
import os
from typing import Any, Dict, Optional

API_KEY_ENV_VAR = "ALPHAVANTAGE_API_KEY"


class ConfigLoader:
    """Loads and manages application configuration from YAML file."""
    def __init__(self, config_path: str):
        """Initialize with path to config file."""
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            print(f"Error: Configuration file not found at '{self.config_path}'")
            raise
        except yaml.YAMLError as e:
            print(f"Error: Malformed YAML in configuration file: {e}")
            raise

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key with optional default."""
        return self.config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Dictionary-style access to config."""
        return self.config[key]

    def get_all(self) -> Dict[str, Any]:
        """Return entire configuration dictionary."""
        return self.config


def setup_logging(config: Optional[Dict[str, Any]]) -> None:
    """Configure application logging with fallback to basic config."""
    try:
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug("Logging configured successfully from config file.")
    except (ValueError, TypeError, AttributeError) as e:
        # Fallback to a basic configuration if the one in the file is malformed
        logging.basicConfig(level=logging.INFO,
                            format="%(asctime)s - %(levelname)s - %(message)s")
        logging.warning(f"Could not configure logging from dict: {e}. Using basic config.")


def resolve_credentials(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the data-source credentials, preferring the environment over config.yml.

    Returns:
        Dict with 'api_key' (None if neither source provides one).
    """
    credentials = dict(config.get('alphavantage_credentials') or {})
    env_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
    if env_key:
        credentials['api_key'] = env_key
    return credentials
