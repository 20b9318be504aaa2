from leaderboard_proxy.ui.client import ProxyClient, ProxyClientError
from leaderboard_proxy.ui.controller import LeaderboardPage
from leaderboard_proxy.ui.state import LeaderboardEntry, Notification, PageState

__all__ = [
    'LeaderboardEntry', 'LeaderboardPage', 'Notification', 'PageState',
    'ProxyClient', 'ProxyClientError'
]
