# Future annotations for forward reference typing compatibility
from __future__ import annotations

# Standard lib imports for logging and typing
import logging
from typing import Any, Mapping, Optional

# Flask primitives for creating the app
from flask import Flask, jsonify

# Enable Cross-Origin Resource Sharing for the JSON API
from flask_cors import CORS

# Import configuration object
from .config import Config

# Configure a standard log format for console handlers
log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Create a logger specific to this module
logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    # Get root logger to attach handler only once
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    # Avoid duplicate handlers by checking existing ones
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        # Emit to console for systemd/journald visibility
        _console = logging.StreamHandler()
        _console.setFormatter(logging.Formatter(log_format))
        root.addHandler(_console)
    # Reduce noisy third-party loggers so we only see our explicit INFO logs and exceptions
    for _noisy_name in ("urllib3", "urllib3.connectionpool"):
        logging.getLogger(_noisy_name).setLevel(logging.WARNING)


def parse_cors_origins(origins_cfg: str):
    # A single '*' means allow all origins
    if origins_cfg.strip() == "*":
        return "*"
    # Split comma-separated list into an array of origins
    return [o.strip() for o in origins_cfg.split(",") if o.strip()]


# Application factory returning a configured Flask app
def create_app(config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    # Create the Flask app instance
    app = Flask(__name__)
    # Load configuration from the Config class, then apply caller overrides
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Ensure Jinja picks up template changes without restart
    if app.config.get("TEMPLATES_AUTO_RELOAD", False):
        app.jinja_env.auto_reload = True

    # Enable CORS for all routes using the allowed origins
    allowed_origins = parse_cors_origins(app.config["CORS_ORIGINS"])
    CORS(app, resources={r"/*": {"origins": allowed_origins}})

    # Register HTTP routes and blueprints
    register_routes(app)

    logger.info(
        "%s %s ready (oembed=%s, cors=%s)",
        app.config["APP_NAME"],
        app.config["VERSION"],
        app.config["OEMBED_ENDPOINT"],
        allowed_origins,
    )
    # Return the fully configured application
    return app


# Helper to bind routes and blueprints
def register_routes(app: Flask) -> None:
    from .ui_portals.homepage import homepage_bp
    from .views import analyze_bp

    app.register_blueprint(homepage_bp)
    app.register_blueprint(analyze_bp)

    @app.get("/api/health")
    def health():
        return jsonify({"ok": True, "app": app.config["APP_NAME"]})
