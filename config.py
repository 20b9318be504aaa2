import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')

    # Upstream leaderboard/auth backend
    UPSTREAM_BASE_URL = os.environ.get('UPSTREAM_BASE_URL',
                                       'http://localhost:5000')
    try:
        UPSTREAM_TIMEOUT_MS = int(os.environ.get('UPSTREAM_TIMEOUT_MS', 10000))
    except ValueError:
        raise ValueError("UPSTREAM_TIMEOUT_MS must be an integer")
    if UPSTREAM_TIMEOUT_MS < 0:
        raise ValueError("UPSTREAM_TIMEOUT_MS must not be negative")

    LEADERBOARD_SORT_BY_SCORE = _env_flag('LEADERBOARD_SORT_BY_SCORE', True)

    CORS_ORIGINS = os.environ.get(
        'CORS_ORIGINS', '*' if FLASK_ENV == 'development' else '')

    DEMO_EMAIL = os.environ.get('DEMO_EMAIL', 'alice.martin@example.com')
    DEMO_PASSWORD = os.environ.get('DEMO_PASSWORD', 'password789')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')

    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3000))

    # Where the page reaches the /api routes; never taken from the request
    PROXY_BASE_URL = os.environ.get('PROXY_BASE_URL') or f'http://127.0.0.1:{PORT}'


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    UPSTREAM_BASE_URL = 'http://upstream.test'
    UPSTREAM_TIMEOUT_MS = 2500
    PROXY_BASE_URL = 'http://proxy.test'
    LEADERBOARD_SORT_BY_SCORE = True
    CORS_ORIGINS = '*'
    LOG_FILE = None
