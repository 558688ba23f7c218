import logging

from flask import Flask
from foodstore.extensions import db, migrate, cors
from foodstore.routes import register_routes
from foodstore.models import Food, Cart, LineItem  # noqa: F401  registers the tables with db.metadata
from foodstore.utils.http import MethodOverrideMiddleware


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS for JSON consumers of the resource routes
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Accept", "X-HTTP-Method-Override"],
                  methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])

    # HTML forms tunnel PATCH/DELETE through POST
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    register_routes(app)

    return app
