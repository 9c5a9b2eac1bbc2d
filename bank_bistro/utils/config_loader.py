"""Configuration file loader with validation"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional
from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "settings.yaml"
REQUIRED_KEYS = ['version', 'pricing', 'discounts', 'loyalty']


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load YAML configuration file with validation.
    Honors the BANK_BISTRO_CONFIG environment variable when no path is given.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary with configuration

    Raises:
        ConfigurationError: If file doesn't exist, is invalid YAML or misses keys
    """
    if config_path is None:
        config_path = os.getenv("BANK_BISTRO_CONFIG", str(DEFAULT_CONFIG_PATH))

    try:
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration file is not a mapping: {config_path}")

        missing_keys = [key for key in REQUIRED_KEYS if key not in config]

        if missing_keys:
            raise ConfigurationError(f"Missing required configuration keys: {missing_keys}")

        return config

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
    except Exception as e:
        raise ConfigurationError(f"Error loading configuration: {e}")


def save_config(config_path: str, config: Dict[str, Any]) -> None:
    """
    Save configuration to YAML file

    Args:
        config_path: Path to configuration file
        config: Configuration dictionary

    Raises:
        ConfigurationError: If unable to write file
    """
    try:
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    except Exception as e:
        raise ConfigurationError(f"Error saving configuration: {e}")


def get_discount_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get discount configuration merged with the loyalty threshold

    Args:
        config: Full configuration dictionary

    Returns:
        Dictionary with 'tiers', 'loyalty_bonus_percent' and 'loyalty_min_orders'
    """
    discounts = config.get('discounts', {})
    loyalty = config.get('loyalty', {})
    return {
        'tiers': discounts.get('tiers', []),
        'loyalty_bonus_percent': discounts.get('loyalty_bonus_percent', 0),
        'loyalty_min_orders': loyalty.get('min_orders'),
    }


def get_pricing_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get pricing configuration"""
    return config.get('pricing', {})
