from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required

from senas.auth import issue_guest_session, set_session_cookie

session_api = Blueprint('session_api', __name__)


@session_api.route('/start-guest-session', methods=['POST'], provide_automatic_options=False)
def start_guest_session():
    data = request.get_json(silent=True) or {}
    username = data.get('username')
    if not isinstance(username, str) or not username.strip():
        return jsonify({'error': 'username is required'}), 400

    _, token = issue_guest_session(username.strip())
    response = jsonify({'message': 'Guest session started'})
    return set_session_cookie(response, token)


@session_api.route('/guest-session', methods=['GET'])
@login_required
def get_guest_session():
    return jsonify(current_user.to_dict())
