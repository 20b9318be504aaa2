from flask import Blueprint, request
import logging

from leaderboard_proxy.errors import InternalError, ProxyError, UpstreamError, ValidationError
from leaderboard_proxy.services.upstream import get_upstream, relay, error_payload
from leaderboard_proxy.utils.auth import bearer_token_required
from leaderboard_proxy.utils.validation import to_number

logger = logging.getLogger(__name__)

bp = Blueprint('leaderboard', __name__)

AUTH_MESSAGE = "Missing or invalid authorization header"


@bp.route('/leaderboard', methods=['GET'])
@bp.route('/leaderboard/get', methods=['GET'])
@bearer_token_required(AUTH_MESSAGE)
def get_leaderboard(token):
    try:
        response = get_upstream().request('GET', '/api/leaderboard', token=token)
        if not response.ok:
            logger.warning(
                f"Leaderboard fetch failed upstream with status {response.status_code}")
            raise UpstreamError("Failed to fetch leaderboard data",
                                response.status_code)

        return relay(response)

    except ProxyError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Error fetching leaderboard: {str(e)}")
        return InternalError("Internal server error").to_response()


def build_update(data):
    """Validate an update body and return the DTO sent upstream"""
    if not isinstance(data, dict):
        raise ValidationError("Missing required fields")

    entry_id = data.get('id')
    username = data.get('username')
    score = data.get('score')

    if not entry_id or not username or score is None:
        raise ValidationError("Missing required fields")

    try:
        numeric_id = to_number(entry_id)
        numeric_score = to_number(score)
    except ValueError:
        raise ValidationError("Invalid ID or score")

    return {"id": numeric_id, "username": username, "score": numeric_score}


@bp.route('/leaderboard/put', methods=['PUT'])
@bearer_token_required(AUTH_MESSAGE)
def update_leaderboard(token):
    try:
        update = build_update(request.get_json(force=True))

        response = get_upstream().request('PUT',
                                          f"/api/leaderboard/{update['id']}",
                                          token=token,
                                          json=update)
        if not response.ok:
            details = error_payload(response)
            message = None
            if isinstance(details, dict):
                message = details.get('error')
            logger.warning(
                f"Score update for entry {update['id']} failed upstream "
                f"with status {response.status_code}: {details}")
            raise UpstreamError(message or "Failed to update score",
                                response.status_code,
                                details=details,
                                include_details=True)

        return relay(response, 200)

    except ProxyError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Error updating leaderboard: {str(e)}", exc_info=True)
        return InternalError("Internal server error", details=str(e)).to_response()
