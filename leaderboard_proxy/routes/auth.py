from flask import Blueprint, request
import logging

from leaderboard_proxy.errors import InternalError, ProxyError, UpstreamError
from leaderboard_proxy.services.upstream import get_upstream, relay

logger = logging.getLogger(__name__)

bp = Blueprint('auth', __name__)


@bp.route('/auth', methods=['POST'])
def login():
    """Forward the login form to the backend and relay its token payload"""
    try:
        data = request.get_json(force=True)
        if not isinstance(data, dict):
            raise ValueError(f"request body is not a JSON object: {data!r}")

        # Field names are passed through with the backend's casing
        credentials = {
            key: data[key]
            for key in ('Email', 'Password') if key in data
        }

        response = get_upstream().request('POST',
                                          '/api/auth/login',
                                          json=credentials)
        if not response.ok:
            logger.warning(
                f"Login rejected upstream with status {response.status_code}")
            raise UpstreamError("Authentication failed", response.status_code)

        return relay(response)

    except ProxyError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Error in login: {str(e)}")
        return InternalError("Internal server error").to_response()
