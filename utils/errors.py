import logging
from functools import wraps

from bson.errors import InvalidId
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"message": self.message}


class ValidationError(ApiError):
    status_code = 400


class Forbidden(ApiError):
    status_code = 403


class NotFound(ApiError):
    status_code = 404


# Wraps a JSON view so every failure ends up as a response from that view
def api_errors(message=None):
    def decorator(view_function):
        @wraps(view_function)
        def decorated_function(*args, **kwargs):
            try:
                return view_function(*args, **kwargs)
            except ApiError as e:
                return jsonify(e.to_dict()), e.status_code
            except InvalidId:
                return jsonify({"message": "Invalid identifier"}), 400
            except HTTPException:
                raise
            except Exception as e:
                logger.exception("Unhandled error in %s: %s", view_function.__name__, e)
                body = {"error": str(e)}
                if message:
                    body = {"message": message, "error": str(e)}
                return jsonify(body), 500
        return decorated_function
    return decorator


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({"message": e.description}), e.code
