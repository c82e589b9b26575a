"""
Application configuration with environment-specific settings.

Usage:
    from config import get_config
    app.config.from_object(get_config())
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory of the application
BASE_DIR = Path(__file__).parent.resolve()


class Config:
    """Base configuration with common settings."""

    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        raise ValueError(
            "SECRET_KEY environment variable is required!\n"
            "Generate one with: python -c 'import secrets; print(secrets.token_hex(32))'"
        )

    # Session configuration
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Content configuration
    ARTICLES_DIR = Path(os.environ.get('ARTICLES_DIR', BASE_DIR / 'articles'))
    SITE_CONFIG_FILE = Path(os.environ.get('SITE_CONFIG_FILE', BASE_DIR / 'config.json'))

    # Access log, one line per request; empty string disables it
    ACCESS_LOG_FILE = os.environ.get('ACCESS_LOG_FILE', str(BASE_DIR / 'log.txt'))

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '200 per minute')

    # Server defaults
    DEFAULT_PORT = 4991


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False
    SESSION_COOKIE_SECURE = False  # Allow HTTP in development

    # Development-specific settings
    EXPLAIN_TEMPLATE_LOADING = False
    SEND_FILE_MAX_AGE_DEFAULT = 0  # Disable caching for development


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True  # Require HTTPS

    # Production-specific settings
    PREFERRED_URL_SCHEME = 'https'

    # Additional validation for production
    if not os.environ.get('SECRET_KEY'):
        raise ValueError("SECRET_KEY must be explicitly set in production!")


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG = True
    TESTING = True
    SESSION_COOKIE_SECURE = False
    WTF_CSRF_ENABLED = False  # Disable CSRF for testing
    RATELIMIT_ENABLED = False

    # No access log file during tests
    ACCESS_LOG_FILE = ''


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env_name=None):
    """
    Get configuration class for specified environment.

    Args:
        env_name (str): Environment name (development/production/testing)
                       If None, uses FLASK_ENV environment variable

    Returns:
        Config class for the specified environment
    """
    if env_name is None:
        env_name = os.environ.get('FLASK_ENV', 'development')

    return config.get(env_name, config['default'])
