import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    return int(value)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key'
    DEBUG = _env_flag('DEBUG', False)
    HOST = os.environ.get('HOST') or '0.0.0.0'
    PORT = _env_int('PORT', 7860)
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Request settings
    MAX_CONTENT_LENGTH = _env_int('MAX_CONTENT_LENGTH', 1 * 1024 * 1024)  # 1MB max request body

    # Conversion settings
    DEFAULT_ENCODING = os.environ.get('DEFAULT_ENCODING') or 'ml'
    REORDER_RA_SUBJOIN = _env_flag('REORDER_RA_SUBJOIN', True)


class TestConfig(Config):
    TESTING = True
    DEBUG = False
