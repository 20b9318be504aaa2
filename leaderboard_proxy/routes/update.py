from flask import Blueprint, request
import logging

from leaderboard_proxy.errors import InternalError, ProxyError, UpstreamError
from leaderboard_proxy.services.upstream import get_upstream, relay
from leaderboard_proxy.utils.auth import bearer_token_required

logger = logging.getLogger(__name__)

bp = Blueprint('update', __name__)


@bp.route('/update', methods=['PUT'])
@bearer_token_required("Missing or invalid authorization token")
def update_user(token):
    """Forward a name/score change for the signed-in user"""
    try:
        data = request.get_json(force=True)
        if not isinstance(data, dict):
            raise ValueError(f"request body is not a JSON object: {data!r}")

        payload = {key: data[key] for key in ('name', 'score') if key in data}

        response = get_upstream().request('PUT',
                                          '/api/user',
                                          token=token,
                                          json=payload)
        if not response.ok:
            logger.warning(
                f"User update failed upstream with status {response.status_code}")
            raise UpstreamError("Failed to update score", response.status_code)

        return relay(response)

    except ProxyError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Error updating user: {str(e)}")
        return InternalError("Internal server error").to_response()
