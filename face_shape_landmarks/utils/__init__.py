"""
Utilities package.
"""
from .config_loader import get_config, set_config, Config
from .logging_config import get_logger, setup_logging, set_log_level

__all__ = [
    'get_config', 'set_config', 'Config',
    'get_logger', 'setup_logging', 'set_log_level',
]
