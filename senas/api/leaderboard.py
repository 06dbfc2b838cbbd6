from flask import Blueprint, current_app, jsonify

from senas.services.leaderboard import top_players

leaderboard_api = Blueprint('leaderboard_api', __name__)


@leaderboard_api.route('/leaderboard', methods=['GET'])
def leaderboard():
    limit = int(current_app.config.get('LEADERBOARD_SIZE', 10))
    return jsonify({'topPlayers': top_players(limit)})
