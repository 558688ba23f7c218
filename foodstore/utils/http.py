from io import BytesIO
from typing import Any, Dict, Optional, Tuple
from urllib.parse import parse_qs

from flask import request, jsonify
from marshmallow import Schema, ValidationError
from werkzeug.wsgi import get_content_length


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    return val


def wants_json() -> bool:
    """True when the client prefers a JSON representation over HTML."""
    accept = request.accept_mimetypes
    best = accept.best_match(["text/html", "application/json"])
    return best == "application/json" and accept[best] > accept["text/html"]


def validate_schema(schema, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Dict[str, Any]]:
    """Load ``payload`` with a schema class or instance, returning ``(data, errors)``."""
    if not isinstance(schema, Schema):
        schema = schema()
    try:
        return schema.load(payload), {}
    except ValidationError as exc:
        return None, exc.messages


class MethodOverrideMiddleware:
    """Let HTML forms issue PATCH/PUT/DELETE by POSTing a ``_method`` field.

    The ``X-HTTP-Method-Override`` header is honoured as well. Only url-encoded
    bodies are inspected; the body is buffered and handed back to the app intact.
    """

    allowed_methods = frozenset(["PATCH", "PUT", "DELETE"])

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            method = environ.get("HTTP_X_HTTP_METHOD_OVERRIDE") or self._form_method(environ)
            if method and method.upper() in self.allowed_methods:
                environ["REQUEST_METHOD"] = method.upper()
        return self.app(environ, start_response)

    def _form_method(self, environ) -> Optional[str]:
        content_type = environ.get("CONTENT_TYPE", "")
        if not content_type.startswith("application/x-www-form-urlencoded"):
            return None
        length = get_content_length(environ) or 0
        body = environ["wsgi.input"].read(length) if length else b""
        environ["wsgi.input"] = BytesIO(body)
        values = parse_qs(body.decode("utf-8", "replace"))
        found = values.get("_method")
        return found[0] if found else None
