"""Flask application factory"""
from flask import Flask
from loguru import logger
import sys


def create_app(config_name='development'):
    """Application factory for creating Flask app instances"""
    app = Flask(__name__)

    # Load configuration
    from .config import config
    app.config.from_object(config[config_name])

    # Configure logging
    configure_logging(app.config['DEBUG'] or app.config.get('TESTING', False))

    # Initialize extensions
    from .extensions import db, cache
    db.init_app(app)
    cache.init_app(app)

    # Invalidate cached candidate lists when terms or nodes change
    from .services.candidate_directory import register_invalidation_listeners
    register_invalidation_listeners()

    # Register blueprints
    from .routes import main, taxonomy, nodes
    app.register_blueprint(main.bp)
    app.register_blueprint(taxonomy.bp, url_prefix='/taxonomy')
    app.register_blueprint(nodes.bp, url_prefix='/node')

    # Register template filters
    from .utils.formatters import register_filters
    register_filters(app)

    # Register CLI commands
    from .cli import register_commands
    register_commands(app)

    logger.info(f"Flask app created with config: {config_name}")

    return app


def configure_logging(debug=False):
    """Configure loguru for the web application"""
    # Remove default handler
    logger.remove()

    # Console handler (always)
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
    )

    # File handler (production)
    if not debug:
        logger.add(
            "logs/scantext_{time:YYYY-MM-DD}.log",
            rotation="00:00",  # New file at midnight
            retention="30 days",
            level="INFO",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"
        )

    logger.info("Logging configured")
