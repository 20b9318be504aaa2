"""HTTP client the page uses to reach the /api proxy routes."""

import requests


class ProxyClientError(Exception):
    """A proxy route answered with a non-2xx status"""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProxyClient:

    def __init__(self, base_url, session=None, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _auth_headers(token):
        return {"Authorization": f"Bearer {token}"}

    @staticmethod
    def _check(response, default_message):
        if response.ok:
            return
        message = None
        try:
            data = response.json()
            if isinstance(data, dict):
                message = data.get('error')
        except ValueError:
            pass
        raise ProxyClientError(message or default_message, response.status_code)

    def login(self, email, password):
        """Exchange credentials for a bearer token"""
        response = self.session.post(self.url('/api/auth'),
                                     json={
                                         "Email": email,
                                         "Password": password
                                     },
                                     timeout=self.timeout)
        # A non-JSON answer is an unexpected error, not a rejected login
        data = response.json()
        if not response.ok:
            message = data.get('error') if isinstance(data, dict) else None
            raise ProxyClientError(message or "Login failed", response.status_code)
        token = data.get('token') if isinstance(data, dict) else None
        if not token:
            raise ProxyClientError("Login failed", response.status_code)
        return token

    def fetch_leaderboard(self, token):
        response = self.session.get(self.url('/api/leaderboard/get'),
                                    headers=self._auth_headers(token),
                                    timeout=self.timeout)
        self._check(response, "Failed to fetch leaderboard data")
        return response.json()

    def update_score(self, token, entry_id, username, score):
        response = self.session.put(self.url('/api/leaderboard/put'),
                                    headers=self._auth_headers(token),
                                    json={
                                        "id": entry_id,
                                        "username": username,
                                        "score": score
                                    },
                                    timeout=self.timeout)
        self._check(response, "Failed to update score")
        return response.json() if response.content else {}
