"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, messages and the bundled word lists
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    COMMON_WORDS,
    EXTENDED_WORDS,
    MAX_ATTEMPTS,
    WORD_LENGTH,
    get_word_statistics,
    load_word_sets,
    validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'COMMON_WORDS', 'EXTENDED_WORDS', 'MAX_ATTEMPTS', 'WORD_LENGTH',
    'validate_word_list_integrity', 'get_word_statistics', 'load_word_sets'
]
