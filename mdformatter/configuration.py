import os
"""
Some configuration is loaded from .env file in project root directory.
- Formatter and schema plugin directories
- Defaults for rendering
- Secrets
"""


class Config(object):
    APP_DIR = os.path.abspath(os.path.dirname(__file__))  # This directory
    APP_ROOT = os.path.abspath(os.path.join(APP_DIR, os.pardir))
    URL = os.environ.get('URL', 'http://localhost:5000')

    # Formatters
    FORMATTER_DIR = os.environ.get('FORMATTER_DIR') or os.path.join(APP_DIR, 'formatters')
    SCHEMA_DIR = os.environ.get('SCHEMA_DIR') or os.path.join(APP_DIR, 'schemas')
    DEFAULT_SCHEMA = os.environ.get('DEFAULT_SCHEMA', 'iso19139')
    DEFAULT_LANGUAGE = os.environ.get('DEFAULT_LANGUAGE', 'eng')
    TEMPLATE_ENCODING = os.environ.get('TEMPLATE_ENCODING', 'utf-8')

    # Secrets
    SECRET_KEY = os.environ.get('SECRET_KEY', 'change-me')


class DevelopmentConfig(Config):
    ENV = 'development'
    DEBUG = True


class TestingConfig(Config):
    ENV = 'testing'
    DEBUG = False
    TESTING = True


class StagingConfig(Config):
    ENV = 'staging'
    DEBUG = True


class ProductionConfig(Config):
    ENV = 'production'
    DEBUG = False
