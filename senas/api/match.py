from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required

from senas import db
from senas.models import Match
from senas.services.matches import (
    MatchError,
    create_or_join_match,
    find_open_match,
    finish_match,
)

match_api = Blueprint('match_api', __name__)


@match_api.route('/create', methods=['POST'])
@login_required
def create_match():
    """
    Returns the caller's open match, joins a waiting one, or opens a new one.
    """
    match, created = create_or_join_match(current_user)
    return jsonify(match.to_dict()), 201 if created else 200


@match_api.route('/current', methods=['GET'])
@login_required
def current_match():
    match = find_open_match(current_user.id)
    if not match:
        return jsonify({'error': 'Not in a match'}), 404
    return jsonify(match.to_dict())


@match_api.route('/<int:match_id>', methods=['GET'])
def get_match(match_id):
    match = db.get_or_404(Match, match_id)
    return jsonify(match.to_dict())


@match_api.route('/<int:match_id>/finish', methods=['POST'])
@login_required
def finish(match_id):
    data = request.get_json(silent=True) or {}
    match = db.get_or_404(Match, match_id)
    try:
        finish_match(match, current_user, data.get('winnerId'))
    except MatchError as exc:
        return jsonify({'error': exc.message}), exc.status
    return jsonify(match.to_dict())
