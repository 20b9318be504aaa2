import json
from unittest.mock import patch

import pytest
import requests

from config import TestingConfig
from leaderboard_proxy import create_app


def make_response(status_code=200, body=None, raw=None):
    """A real requests.Response carrying ``body`` as JSON (or ``raw`` bytes)"""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = 'utf-8'
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode('utf-8')
        response.headers['Content-Type'] = 'application/json'
    else:
        response._content = b''
    return response


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upstream():
    """Patched requests.request used by the upstream client"""
    with patch('leaderboard_proxy.services.upstream.requests.request') as mock_request:
        mock_request.return_value = make_response(200, {})
        yield mock_request
