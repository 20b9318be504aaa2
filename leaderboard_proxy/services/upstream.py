# leaderboard_proxy/services/upstream.py
"""Thin client for the upstream leaderboard/auth backend.

Every proxy route goes through :class:`UpstreamClient` so the base URL, the
bearer header and the timeout are applied the same way everywhere. There are no
retries: a call is a single best-effort forward.
"""

import logging

import requests
from flask import current_app, jsonify

logger = logging.getLogger(__name__)


class UpstreamClient:

    def __init__(self, base_url, timeout_ms=None):
        self.base_url = base_url.rstrip('/')
        # requests takes seconds; 0 or None means wait forever
        self.timeout = timeout_ms / 1000.0 if timeout_ms else None

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, token=None, json=None):
        """Send one request upstream and return the raw ``requests.Response``.

        Network failures and timeouts surface as ``requests.RequestException``
        for the calling route to turn into a 500.
        """
        url = self.url(path)
        headers = {}
        if json is not None:
            headers['Content-Type'] = 'application/json'
        if token is not None:
            headers['Authorization'] = f'Bearer {token}'

        logger.debug(f"Forwarding {method} {url}")
        response = requests.request(method,
                                    url,
                                    headers=headers,
                                    json=json,
                                    timeout=self.timeout)
        logger.debug(f"Upstream {method} {url} answered {response.status_code}")
        return response


def get_upstream():
    """Build a client from the current app's configuration"""
    return UpstreamClient(current_app.config['UPSTREAM_BASE_URL'],
                          current_app.config.get('UPSTREAM_TIMEOUT_MS'))


def read_json(response):
    """Decode a success body; an empty body is treated as ``{}``.

    Malformed JSON raises ``ValueError``.
    """
    if not response.content or not response.content.strip():
        return {}
    return response.json()


def error_payload(response):
    """Best-effort decode of an upstream error body, ``None`` if it isn't JSON"""
    try:
        return response.json()
    except ValueError:
        return None


def relay(response, status_code=None):
    """Pass a successful upstream answer through to the browser"""
    if status_code is None:
        # 204 cannot carry the JSON body we always send back
        status_code = 200 if response.status_code == 204 else response.status_code
    return jsonify(read_json(response)), status_code
