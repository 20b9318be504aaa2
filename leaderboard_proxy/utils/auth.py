from flask import request
from functools import wraps
import logging

from leaderboard_proxy.errors import AuthError

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '


def extract_bearer_token(auth_header):
    """Return the token of an ``Authorization: Bearer <token>`` header, or None"""
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return None
    token = auth_header.split(' ')[1]
    return token or None


def bearer_token_required(message):
    """Reject the request with 401 ``message`` unless it carries a bearer token.

    The token is handed to the view as the ``token`` keyword argument.
    """

    def decorator(f):

        @wraps(f)
        def decorated_function(*args, **kwargs):
            token = extract_bearer_token(request.headers.get('Authorization'))
            if token is None:
                logger.info(
                    f"Rejected {request.method} {request.path}: no bearer token")
                return AuthError(message).to_response()

            kwargs['token'] = token
            return f(*args, **kwargs)

        return decorated_function

    return decorator
