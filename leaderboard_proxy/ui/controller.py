# leaderboard_proxy/ui/controller.py
"""Drives the login/leaderboard page through its two states.

Unauthenticated (no token) and Authenticated (token present). Every network
call goes through a :class:`~leaderboard_proxy.ui.client.ProxyClient` and every
outcome is recorded by dispatching an action to the reducer in
:mod:`leaderboard_proxy.ui.state`.
"""

import logging

from leaderboard_proxy.ui.client import ProxyClientError
from leaderboard_proxy.ui.state import (
    Action, PageState, reduce, entries_from_payload, parse_score_input,
    CREDENTIALS_CHANGED, LOGIN_SUCCEEDED, LOGIN_FAILED, LOGGED_OUT,
    LEADERBOARD_LOADED, LEADERBOARD_FAILED, SCORE_UPDATED, SCORE_UPDATE_FAILED,
    NOTIFICATIONS_CLEARED)

logger = logging.getLogger(__name__)


class LeaderboardPage:
    """Page component: holds a PageState and runs the user's actions.

    With ``auto_refresh`` the leaderboard is fetched right after a login and
    after every successful score update. The server-rendered page turns it off
    because each of its form posts redirects to a page load that fetches anyway.
    """

    def __init__(self, client, state=None, sort_by_score=True, auto_refresh=True):
        self.client = client
        self.state = state if state is not None else PageState()
        self.sort_by_score = sort_by_score
        self.auto_refresh = auto_refresh

    def dispatch(self, action_type, **payload):
        self.state = reduce(self.state, Action(action_type, payload))
        return self.state

    def set_credentials(self, email=None, password=None):
        changes = {}
        if email is not None:
            changes['email'] = email
        if password is not None:
            changes['password'] = password
        return self.dispatch(CREDENTIALS_CHANGED, **changes)

    def login(self, email=None, password=None):
        self.set_credentials(email, password)
        try:
            token = self.client.login(self.state.email, self.state.password)
        except ProxyClientError as e:
            logger.info(f"Login rejected: {e.message}")
            return self.dispatch(LOGIN_FAILED, message=e.message)
        except Exception as e:
            logger.error(f"Error during login: {str(e)}")
            return self.dispatch(LOGIN_FAILED,
                                 message="An unexpected error occurred")

        self.dispatch(LOGIN_SUCCEEDED, token=token)
        if self.auto_refresh:
            self.refresh()
        return self.state

    def logout(self):
        # Client-side only: the backend is not told
        return self.dispatch(LOGGED_OUT)

    def refresh(self):
        """Fetch the leaderboard; previous rows are kept if this fails"""
        if not self.state.authenticated:
            return self.state
        try:
            data = self.client.fetch_leaderboard(self.state.token)
            entries = entries_from_payload(data, sort_by_score=self.sort_by_score)
        except Exception as e:
            logger.warning(f"Failed to fetch leaderboard: {str(e)}")
            return self.dispatch(LEADERBOARD_FAILED)
        return self.dispatch(LEADERBOARD_LOADED, entries=entries)

    def update_score(self, entry_id, new_score):
        entry = self.state.find_entry(entry_id)
        if entry is None or not self.state.authenticated:
            return self.state
        try:
            self.client.update_score(self.state.token, entry.id, entry.name,
                                     new_score)
        except Exception as e:
            logger.warning(f"Failed to update score of entry {entry_id}: {str(e)}")
            return self.dispatch(SCORE_UPDATE_FAILED)

        self.dispatch(SCORE_UPDATED)
        if self.auto_refresh:
            self.refresh()
        return self.state

    def decrement(self, entry_id):
        entry = self.state.find_entry(entry_id)
        if entry is None:
            return self.state
        return self.update_score(entry_id, entry.score - 1)

    def increment(self, entry_id):
        entry = self.state.find_entry(entry_id)
        if entry is None:
            return self.state
        return self.update_score(entry_id, entry.score + 1)

    def set_score(self, entry_id, raw_value):
        """Set a score typed by the operator; unreadable input is ignored"""
        score = parse_score_input(raw_value)
        if score is None:
            return self.state
        return self.update_score(entry_id, score)

    def take_notifications(self):
        notifications = self.state.notifications
        self.dispatch(NOTIFICATIONS_CLEARED)
        return notifications
