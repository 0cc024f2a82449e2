"""
Configuration module for TruckFlow.
"""
from .settings import (
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    TruckflowConfig,
    get_config,
    load_config,
    reload_config,
)

__all__ = [
    'DEFAULT_INPUT_FILE',
    'DEFAULT_OUTPUT_FILE',
    'TruckflowConfig',
    'get_config',
    'load_config',
    'reload_config',
]
