"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

# Load environment variables from config.env (optional)
load_dotenv(os.path.join(CONFIG_DIR, 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', 6))
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', os.path.join(CONFIG_DIR, 'wordles.json'))

    # Storage Settings
    SAVE_DATA_PATH = os.getenv('SAVE_DATA_PATH', os.path.join('data', 'save_data.json'))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
