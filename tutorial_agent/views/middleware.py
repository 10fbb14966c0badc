from __future__ import annotations

import logging
from functools import wraps
from typing import Callable

from flask import request
from werkzeug.exceptions import BadRequest

from ..errors import InvalidRequestBodyError


def require_json_body(handler: Callable) -> Callable:
    """
    Decorator for HTTP views that consume a JSON object body.

    Decodes the request body regardless of Content-Type and passes the
    resulting dict to the handler as its first argument. A body that is not
    valid JSON raises InvalidRequestBodyError; valid JSON that is not an
    object (null, a list, a number) is handed over as an empty dict.

    Usage:
        @analyze_bp.post("/analyze")
        @require_json_body
        def analyze(body):
            # body is always a dict here
            ...
    """
    @wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            # Decode JSON body even when the client omits the JSON content type
            body = request.get_json(force=True)
        except BadRequest as e:
            logging.warning(
                "require_json_body: undecodable body (handler=%s, path=%s, clen=%s)",
                handler.__name__,
                request.path,
                request.content_length,
            )
            raise InvalidRequestBodyError() from e
        if not isinstance(body, dict):
            body = {}
        return handler(body, *args, **kwargs)
    return wrapper
