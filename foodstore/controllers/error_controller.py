from flask import render_template

from foodstore.utils.errors import NotFoundError
from foodstore.utils.http import error, wants_json


def not_found_handler(exc):
    if not isinstance(exc, NotFoundError):
        exc = NotFoundError("The page you were looking for doesn't exist.")
    if wants_json():
        extra = {"details": dict(exc.details)} if exc.details else {}
        return error(exc.code, exc.message, exc.http_status, **extra)
    return render_template("errors/404.html", message=exc.message), exc.http_status
