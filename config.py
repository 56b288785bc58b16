import os


def _optional_int(name, default=None):
    value = os.environ.get(name)
    if value is None or value.strip() == '':
        return default
    return int(value)


def engine_options(database_url, timeout):
    """Pool settings plus a connect timeout for the database content source"""
    options = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
        'pool_timeout': timeout,
    }
    if database_url.startswith('postgresql'):
        options['connect_args'] = {
            'connect_timeout': max(1, int(timeout)),
            'options': f'-c statement_timeout={int(timeout * 1000)}',
        }
    elif database_url.startswith('sqlite'):
        options['connect_args'] = {'timeout': timeout}
    return options


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    JSON_AS_ASCII = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database Settings (only used by the "database" content source)
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    # Content Settings
    CONTENT_SOURCE = os.environ.get('CONTENT_SOURCE', 'files')  # files, http, database
    CONTENT_DIR = os.environ.get('CONTENT_DIR', 'content_files')
    CONTENT_API_URL = os.environ.get('CONTENT_API_URL')
    CONTENT_TIMEOUT = float(os.environ.get('CONTENT_TIMEOUT', '5'))

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    # CONTENT_TIMEOUT bounds database reads as well as HTTP ones
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI, CONTENT_TIMEOUT)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Home page sections (None shows every item)
    HOME_POST_LIMIT = _optional_int('HOME_POST_LIMIT')
    HOME_PROJECT_LIMIT = _optional_int('HOME_PROJECT_LIMIT', 2)

    # Theme Settings
    THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365

    # Site Metadata
    SITE_TITLE = os.environ.get('SITE_TITLE', 'JK | Portfolio')
    SITE_DESCRIPTION = os.environ.get('SITE_DESCRIPTION', 'my portfolio website')
    AUTHOR_NAME = os.environ.get('AUTHOR_NAME', 'Joseph Kitheka')
    AUTHOR_INITIALS = os.environ.get('AUTHOR_INITIALS', 'JK')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing pool settings SQLite's StaticPool does not accept.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    CONTENT_SOURCE = 'files'
    HOME_POST_LIMIT = None
    HOME_PROJECT_LIMIT = 2


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
