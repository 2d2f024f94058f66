"""配置模块"""
from .config import (
    EXPRESSION_CONFIG, INTEGRATION_CONFIG, STEPPING_MODES,
    DISPLAY_CONFIG, SAMPLING_CONFIG, validate_config
)

__all__ = [
    'EXPRESSION_CONFIG', 'INTEGRATION_CONFIG', 'STEPPING_MODES',
    'DISPLAY_CONFIG', 'SAMPLING_CONFIG', 'validate_config'
]
