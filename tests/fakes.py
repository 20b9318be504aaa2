from leaderboard_proxy.ui.client import ProxyClientError


class FakeProxyClient:
    """Records calls made by the page and answers from canned data"""

    def __init__(self, token="abc123", rows=None, login_error=None,
                 fetch_error=None, update_error=None):
        self.token = token
        self.rows = rows if rows is not None else []
        self.login_error = login_error
        self.fetch_error = fetch_error
        self.update_error = update_error
        self.calls = []

    def login(self, email, password):
        self.calls.append(('login', email, password))
        if self.login_error is not None:
            raise self.login_error
        return self.token

    def fetch_leaderboard(self, token):
        self.calls.append(('fetch_leaderboard', token))
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.rows

    def update_score(self, token, entry_id, username, score):
        self.calls.append(('update_score', token, entry_id, username, score))
        if self.update_error is not None:
            raise self.update_error
        for row in self.rows:
            if row['id'] == entry_id:
                row['score'] = score
        return {"id": entry_id, "username": username, "score": score}


def rejected(message="Authentication failed", status_code=401):
    return ProxyClientError(message, status_code)
