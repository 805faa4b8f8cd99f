"""
Wordle Engine Package

A word-guessing game engine with a multi-game registry, file persistence
and a thin JSON HTTP layer.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: The GameService the routes operate on

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # The service is owned by the caller and injected, not a module global
    app.extensions['game_service'] = game_service

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    return app
