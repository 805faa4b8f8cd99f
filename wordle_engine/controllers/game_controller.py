"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, request, jsonify
from werkzeug.exceptions import HTTPException
from ..services.errors import GameError
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def get_game_service():
    """The GameService injected into the running app."""
    return current_app.extensions.get('game_service')


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_error_response(action, error, game_id=None):
    error_response = {
        'success': False,
        'error': error.message
    }
    game_logger.log_server_response(
        request, action, False, error_response, game_id,
        error_type=type(error).__name__
    )
    return jsonify(error_response), error.status_code


@game_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    """Log anything a route did not handle and answer with a JSON 500."""
    if isinstance(error, HTTPException):
        return error
    game_logger.log_error(request, error, request.endpoint or 'unknown')
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, request.endpoint or 'unknown', False, error_response)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'new_game')

    try:
        game_id = game_service.create_game()
    except GameError as e:
        game_logger.log_error(request, e, 'new_game')
        return _game_error_response('new_game', e)

    state = game_service.get_game(game_id)
    response_data = {
        'success': True,
        'game_id': game_id,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, game_id,
        max_guesses=state.max_guesses
    )

    return jsonify(response_data), 201


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game(game_id)
    if state is None:
        error_response = {
            'success': False,
            'error': 'Game not found'
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 404

    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        guess_count=state.guess_count, is_complete=state.is_complete
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 400

    guess = data['guess']

    game_logger.log_user_action(
        request, 'submit_guess', game_id,
        guess=guess, guess_length=len(guess)
    )

    try:
        state = game_service.submit_guess(game_id, guess)
    except GameError as e:
        return _game_error_response('submit_guess', e, game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=guess, round=state.guess_count, is_complete=state.is_complete
    )

    return jsonify(response_data)


@game_bp.route('/games', methods=['GET'])
def list_games():
    """List every game, newest first."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'list_games')

    games = game_service.list_games()
    response_data = {
        'success': True,
        'games': [asdict(summary) for summary in games]
    }

    game_logger.log_server_response(request, 'list_games', True, response_data, count=len(games))

    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'unavailable',
        'active_games': len(game_service.registry) if game_service else 0,
        'persistence_ok': game_service.persistence_ok if game_service else False,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)
