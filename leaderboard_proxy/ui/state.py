# leaderboard_proxy/ui/state.py
"""Page state for the login/leaderboard screen.

The state is an immutable :class:`PageState`. It only changes through
:func:`reduce`, which takes the current state and an :class:`Action` and returns
a new state. Nothing here performs I/O, so every transition can be tested
without a server or a template.
"""

import re
from collections import namedtuple
from dataclasses import dataclass, field, replace

LeaderboardEntry = namedtuple('LeaderboardEntry', ['id', 'name', 'score'])

Notification = namedtuple('Notification', ['title', 'description', 'variant'])

# Action types
CREDENTIALS_CHANGED = 'credentials_changed'
LOGIN_SUCCEEDED = 'login_succeeded'
LOGIN_FAILED = 'login_failed'
LOGGED_OUT = 'logged_out'
LEADERBOARD_LOADED = 'leaderboard_loaded'
LEADERBOARD_FAILED = 'leaderboard_failed'
SCORE_UPDATED = 'score_updated'
SCORE_UPDATE_FAILED = 'score_update_failed'
NOTIFICATIONS_CLEARED = 'notifications_cleared'


@dataclass(frozen=True)
class Action:
    type: str
    payload: dict = field(default_factory=dict)


@dataclass(frozen=True)
class PageState:
    token: str = None
    email: str = ''
    password: str = ''
    entries: tuple = ()
    notifications: tuple = ()

    @property
    def authenticated(self):
        return bool(self.token)

    def find_entry(self, entry_id):
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def ranked(self):
        """(rank, entry) pairs, rank being the 1-based display position"""
        return list(enumerate(self.entries, start=1))


def success(description):
    return Notification("Success", description, 'default')


def failure(description):
    return Notification("Error", description, 'destructive')


def entries_from_payload(data, sort_by_score=True):
    """Turn the backend's ``[{id, username, score}]`` list into entries.

    Raises ValueError when the payload is not a list of such items.
    """
    if not isinstance(data, list):
        raise ValueError("leaderboard payload is not a list")

    entries = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"leaderboard item is not an object: {item!r}")
        try:
            entry_id, name, score = item['id'], item['username'], item['score']
        except KeyError as e:
            raise ValueError(f"leaderboard item is missing {e}")
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ValueError(f"score is not a number: {score!r}")
        if isinstance(score, float) and score.is_integer():
            score = int(score)
        entries.append(LeaderboardEntry(entry_id, name, score))

    if sort_by_score:
        # stable, so ties keep the backend's order
        entries.sort(key=lambda entry: entry.score, reverse=True)
    return tuple(entries)


_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_score_input(raw):
    """Read an operator-typed score the way ``parseInt`` does.

    Leading whitespace, an optional sign and digits are used; anything after
    them is ignored. Returns None when no integer can be read.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def reduce(state, action):
    """Return the state that results from applying ``action`` to ``state``"""
    payload = action.payload

    if action.type == CREDENTIALS_CHANGED:
        return replace(state,
                       email=payload.get('email', state.email),
                       password=payload.get('password', state.password))

    if action.type == LOGIN_SUCCEEDED:
        return replace(state,
                       token=payload['token'],
                       notifications=state.notifications +
                       (success("Successfully logged in"), ))

    if action.type == LOGIN_FAILED:
        return replace(state,
                       notifications=state.notifications +
                       (failure(payload.get('message') or "Login failed"), ))

    if action.type == LOGGED_OUT:
        return replace(state,
                       token=None,
                       entries=(),
                       notifications=state.notifications +
                       (Notification(None, "Successfully logged out",
                                     'default'), ))

    if action.type == LEADERBOARD_LOADED:
        return replace(state, entries=tuple(payload['entries']))

    if action.type == LEADERBOARD_FAILED:
        # previous rows stay on screen
        return replace(state,
                       notifications=state.notifications +
                       (failure("Failed to fetch leaderboard data"), ))

    if action.type == SCORE_UPDATED:
        return replace(state,
                       notifications=state.notifications +
                       (success("Score updated successfully"), ))

    if action.type == SCORE_UPDATE_FAILED:
        return replace(state,
                       notifications=state.notifications +
                       (failure("Failed to update score"), ))

    if action.type == NOTIFICATIONS_CLEARED:
        return replace(state, notifications=())

    raise ValueError(f"Unknown action type: {action.type}")
