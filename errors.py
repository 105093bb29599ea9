from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException

from database import db


class PujaPathError(Exception):
    """Base class for errors that map straight onto an HTTP response"""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"message": self.message}


class ValidationFailure(PujaPathError):
    status_code = 400

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

    def to_dict(self):
        return {"message": self.message, "errors": self.errors}


class DuplicateEntity(PujaPathError):
    status_code = 400


class InvalidTransition(PujaPathError):
    status_code = 400


class AuthenticationFailed(PujaPathError):
    status_code = 401


class AuthorizationDenied(PujaPathError):
    status_code = 403


class NotFound(PujaPathError):
    status_code = 404


class Conflict(PujaPathError):
    """Row is still referenced by other rows (restrict delete)"""

    status_code = 409


class ConcurrencyConflict(PujaPathError):
    """Row changed underneath us; the caller may retry"""

    status_code = 409

    def to_dict(self):
        return {"message": self.message, "retryable": True}


def register_error_handlers(app):
    @app.errorhandler(PujaPathError)
    def handle_domain_error(error):
        if error.status_code >= 500:
            app.logger.error(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        # Let Flask render its own 404/405/etc.
        if isinstance(error, HTTPException):
            return error

        db.session.rollback()
        app.logger.exception(f"Unhandled error: {error}")
        body = {"message": "An unexpected error occurred"}
        if current_app.config.get("EXPOSE_ERROR_DETAILS"):
            body["message"] = str(error)
            cause = error.__cause__ or error.__context__
            body["details"] = str(cause) if cause else None
        return jsonify(body), 500
