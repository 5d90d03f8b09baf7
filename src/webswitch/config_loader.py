"""
Configuration loader for the WebSwitch client
Loads and validates configuration from YAML files
"""

import yaml
import logging
from typing import Dict, Any
from pathlib import Path
from datetime import datetime
import pytz

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"

def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load configuration from YAML file with validation
    """
    try:
        config_file = Path(config_path)
        if not config_file.exists():
            logger.error(f"Configuration file not found: {config_path}")
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}

        # Validate required sections
        _validate_config(config)

        # Apply defaults
        config = _apply_defaults(config)

        logger.info(f"Configuration loaded from {config_path}")
        return config

    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        raise

def _validate_config(config: Dict) -> None:
    """Validate that required configuration sections exist"""
    if not isinstance(config, dict):
        raise ValueError("Configuration must be a mapping")

    if 'webswitch' not in config:
        raise ValueError("Missing required configuration section: webswitch")

    # Validate webswitch section
    device = config['webswitch'] or {}
    if not device.get('base_url'):
        raise ValueError("webswitch.base_url is required and must not be empty")

    has_username = device.get('username') is not None
    has_password = device.get('password') is not None
    if has_username != has_password:
        raise ValueError("webswitch.username and webswitch.password must be set together")

    timeout = device.get('timeout_seconds')
    if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
        raise ValueError("webswitch.timeout_seconds must be a positive number")

    # Validate sensors section if present
    sensors = config.get('sensors') or {}
    indices = sensors.get('indices')
    if indices is not None:
        if not isinstance(indices, list) or not indices:
            raise ValueError("sensors.indices must be a non-empty list")
        for index in indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise ValueError(f"sensors.indices must contain integers, got {index!r}")

    # Validate logging timezone if present
    timezone_name = (config.get('logging') or {}).get('timezone')
    if timezone_name:
        try:
            pytz.timezone(timezone_name)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown logging.timezone: {timezone_name}") from None

def _apply_defaults(config: Dict) -> Dict:
    """Apply default values to configuration"""

    # Device defaults
    config['webswitch'] = config['webswitch'] or {}
    device_defaults = {
        'username': None,
        'password': None,
        'timeout_seconds': 5,
        'verify_ssl': True
    }
    for key, default_value in device_defaults.items():
        if key not in config['webswitch']:
            config['webswitch'][key] = default_value

    # Sensor defaults
    if not config.get('sensors'):
        config['sensors'] = {}
    if 'indices' not in config['sensors']:
        config['sensors']['indices'] = [1, 2, 3]

    # Logging defaults
    if not config.get('logging'):
        config['logging'] = {}
    logging_defaults = {
        'level': 'INFO',
        'file': None,
        'console_output': True,
        'timezone': 'UTC'
    }
    for key, default_value in logging_defaults.items():
        if key not in config['logging']:
            config['logging'][key] = default_value

    return config


class TimezoneFormatter(logging.Formatter):
    """Formatter rendering timestamps in a configured timezone"""

    def __init__(self, fmt=None, timezone_name: str = 'UTC'):
        super().__init__(fmt)
        self.tz = pytz.timezone(timezone_name)

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        if datefmt:
            return dt.strftime(datefmt)
        else:
            # Default format: YYYY-MM-DD HH:MM:SS TZ
            return dt.strftime('%Y-%m-%d %H:%M:%S %Z')

def setup_logging(config: Dict) -> None:
    """Setup logging based on configuration"""
    log_config = config.get('logging', {})
    level = log_config.get('level', 'INFO')
    timezone_name = log_config.get('timezone') or 'UTC'

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = TimezoneFormatter(log_format, timezone_name)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=[]
    )
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))

    # Console handler
    if log_config.get('console_output', True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    # File handler
    log_file = log_config.get('file')
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logger.info(f"Logging configured: level={level}, timezone={timezone_name}, console={log_config.get('console_output', True)}, file={log_file}")

def get_sample_config() -> Dict:
    """Return a sample configuration for reference"""
    return {
        "webswitch": {
            "base_url": "http://wsm.homenet.local",
            "username": None,
            "password": None,
            "timeout_seconds": 5,
            "verify_ssl": True
        },
        "sensors": {
            "indices": [1, 2, 3]
        },
        "logging": {
            "level": "INFO",
            "file": None,
            "console_output": True,
            "timezone": "UTC"
        }
    }
