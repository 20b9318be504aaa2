"""Error types returned to the browser as JSON envelopes."""

from flask import jsonify


class ProxyError(Exception):
    """Base class for errors answered with an ``{"error": ...}`` envelope"""
    status_code = 500

    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self):
        payload = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload

    def to_response(self):
        return jsonify(self.to_dict()), self.status_code


class AuthError(ProxyError):
    status_code = 401


class ValidationError(ProxyError):
    status_code = 400


class UpstreamError(ProxyError):
    """The backend answered with a non-2xx status"""

    def __init__(self, message, status_code, details=None, include_details=False):
        super().__init__(message, status_code=status_code, details=details)
        self.include_details = include_details

    def to_dict(self):
        payload = {"error": self.message}
        if self.include_details:
            payload["details"] = self.details
        return payload


class InternalError(ProxyError):
    status_code = 500
