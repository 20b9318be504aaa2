import logging

import pytest

from config import TestingConfig
from leaderboard_proxy import create_app


def test_health_check(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    assert response.get_json() == {
        "status": "ok",
        "message": "API is running",
        "upstream": "http://upstream.test"
    }


def test_unknown_api_path_answers_json(client):
    response = client.get('/api/does-not-exist')

    assert response.status_code == 404
    assert response.is_json
    assert "error" in response.get_json()


def test_wrong_method_answers_json(client, upstream):
    response = client.get('/api/auth')

    assert response.status_code == 405
    assert response.is_json
    upstream.assert_not_called()


def test_cors_headers_on_api_routes(client, upstream):
    response = client.get('/api/health', headers={"Origin": "http://localhost:3000"})

    assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'http://localhost:3000')


def test_cors_restricted_to_configured_origins():

    class RestrictedConfig(TestingConfig):
        CORS_ORIGINS = 'https://scores.example.com'

    client = create_app(RestrictedConfig).test_client()

    allowed = client.get('/api/health', headers={"Origin": "https://scores.example.com"})
    denied = client.get('/api/health', headers={"Origin": "https://evil.example.com"})

    assert allowed.headers.get('Access-Control-Allow-Origin') == 'https://scores.example.com'
    assert 'Access-Control-Allow-Origin' not in denied.headers


@pytest.mark.parametrize('timeout_ms, expected', [(2500, 2.5), (0, None)])
def test_upstream_timeout_from_config(app, timeout_ms, expected):
    from leaderboard_proxy.services.upstream import get_upstream

    app.config['UPSTREAM_TIMEOUT_MS'] = timeout_ms
    app.config['UPSTREAM_BASE_URL'] = 'http://backend.internal:5000/'
    with app.app_context():
        upstream = get_upstream()

    assert upstream.timeout == expected
    assert upstream.url('/api/leaderboard') == 'http://backend.internal:5000/api/leaderboard'


def test_proxy_base_url_defaults_to_local_port(monkeypatch):
    import importlib
    import config

    monkeypatch.delenv('PROXY_BASE_URL', raising=False)
    monkeypatch.setenv('PORT', '4321')
    try:
        reloaded = importlib.reload(config)
        assert reloaded.Config.PROXY_BASE_URL == 'http://127.0.0.1:4321'
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_repeated_create_app_opens_one_log_file(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, 'handlers', [])
    log_file = tmp_path / 'proxy.log'

    class FileLoggingConfig(TestingConfig):
        LOG_FILE = str(log_file)

    create_app(FileLoggingConfig)
    create_app(FileLoggingConfig)

    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    try:
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(log_file)
    finally:
        for handler in file_handlers:
            handler.close()
