"""
Stats Controller

Serves the win/loss statistics and the fastest-times leaderboard.
"""

from flask import Blueprint, request, jsonify
from ..exceptions import PersistenceError
from ..services.stats_service import get_stats_service
from ..utils.game_logger import game_logger

stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
def get_stats():
    """Return aggregated statistics with durations in seconds."""
    stats_service = get_stats_service()
    if not stats_service:
        return jsonify({
            'success': False,
            'error': 'Stats service unavailable'
        }), 500

    game_logger.log_user_action(request, 'get_stats')

    try:
        summary = stats_service.summary()
    except PersistenceError as e:
        game_logger.log_error(request, e, 'get_stats')
        error_response = {
            'success': False,
            'error': 'Statistics are currently unavailable'
        }
        game_logger.log_server_response(request, 'get_stats', False, error_response)
        return jsonify(error_response), 503

    response_data = {
        'success': True,
        'stats': {
            'wins': summary.wins,
            'losses': summary.losses,
            'games_played': summary.games_played,
            'average_incorrect_guesses': round(summary.average_incorrect_guesses, 2),
            'leaderboard': [
                {'rank': rank, 'seconds': round(seconds, 2)}
                for rank, seconds in enumerate(summary.top_durations_seconds, start=1)
            ]
        }
    }

    game_logger.log_server_response(request, 'get_stats', True, response_data)
    return jsonify(response_data)
