"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..config.game_settings import WORD_LENGTH
from ..exceptions import InvalidWordError
from ..services.game_service import get_game_service
from ..services.stats_service import get_stats_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _rejected(action, game_id, error, state=None, **kwargs):
    error_response = {
        'success': False,
        'error': error
    }
    if state is not None:
        error_response['state'] = asdict(state)
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), 400


def _failed(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session, optionally with a custom target word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _unavailable()

        data = request.get_json(silent=True) or {}
        custom_word = data.get('custom_word')

        game_logger.log_user_action(request, 'new_game', custom_word=custom_word is not None)

        game_id = game_service.create_new_game(custom_word)
        if game_id is None:
            return _rejected('new_game', None, 'Custom word must be a valid 5-letter word')

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=WORD_LENGTH, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        return _failed('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'get_state', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _failed('get_state', e, game_id)


@game_bp.route('/game/<game_id>/input', methods=['PUT'])
def update_input(game_id):
    """Replace the letters typed so far."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _unavailable()

        data = request.get_json(silent=True) or {}
        text = data.get('text')
        if not isinstance(text, str):
            return _rejected('update_input', game_id, 'Text is required')

        game_logger.log_user_action(request, 'update_input', game_id, input_length=len(text))

        with game_service.session(game_id) as session:
            if session is None:
                return _not_found('update_input', game_id)
            session.update_current_input(text)
            state = session.snapshot(game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'update_input', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _failed('update_input', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit the current input, or the supplied guess, for evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _unavailable()

        data = request.get_json(silent=True) or {}
        guess = data.get('guess')
        if guess is not None and not isinstance(guess, str):
            return _rejected('submit_guess', game_id, 'Guess must be a valid string')

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        with game_service.session(game_id) as session:
            if session is None:
                return _not_found('submit_guess', game_id)

            if session.is_over:
                return _rejected('submit_guess', game_id, 'Game is already over',
                                 session.snapshot(game_id))

            if guess is not None:
                guess = guess.strip()
                if len(guess) != WORD_LENGTH:
                    return _rejected('submit_guess', game_id, 'Guess must be exactly 5 letters',
                                     session.snapshot(game_id), attempted_guess=guess)
                session.update_current_input(guess)

            if len(session.current_input) != WORD_LENGTH:
                return _rejected('submit_guess', game_id, 'Guess must be exactly 5 letters',
                                 session.snapshot(game_id))

            submitted = session.current_input
            try:
                session.submit_guess()
            except InvalidWordError as e:
                return _rejected('submit_guess', game_id, e.message, session.snapshot(game_id),
                                 validation_error=e.message, attempted_guess=e.word)

            state = session.snapshot(game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=submitted, attempts_used=state.attempts_used, is_over=state.is_over
        )

        if state.is_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.has_won else 'game_lost', request.remote_addr,
                attempts_used=state.attempts_used, target_word=state.answer, final_guess=submitted
            )

        return jsonify(response_data)

    except Exception as e:
        return _failed('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
def restart_game(game_id):
    """Start the game over with a fresh random word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _unavailable()

        game_logger.log_user_action(request, 'restart_game', game_id)

        with game_service.session(game_id) as session:
            if session is None:
                return _not_found('restart_game', game_id)
            session.start_new_game()
            state = session.snapshot(game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _failed('restart_game', e, game_id)


@game_bp.route('/game/<game_id>/custom_word', methods=['POST'])
def set_custom_word(game_id):
    """Start the game over with a chosen target word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _unavailable()

        data = request.get_json(silent=True) or {}
        word = data.get('word')
        if not isinstance(word, str):
            return _rejected('custom_word', game_id, 'Word is required')

        game_logger.log_user_action(request, 'custom_word', game_id)

        with game_service.session(game_id) as session:
            if session is None:
                return _not_found('custom_word', game_id)
            accepted = session.set_custom_word(word)
            state = session.snapshot(game_id)

        if not accepted:
            return _rejected('custom_word', game_id, 'Custom word must be a valid 5-letter word', state)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'custom_word', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _failed('custom_word', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        return _failed('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        stats_service = get_stats_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'dictionary_size': len(game_service.dictionary) if game_service else 0,
            'stats_available': stats_service is not None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
