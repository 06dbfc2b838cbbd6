"""
HTML pages: Home, Game and Match.

These render the same flow as the client package does over the JSON API,
using the shared services so a browser without scripts can play.
"""

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required

from senas import db
from senas.auth import issue_guest_session, set_session_cookie
from senas.models import Match
from senas.services.leaderboard import top_players
from senas.services.matches import create_or_join_match, find_open_match

pages = Blueprint('pages', __name__)

MATCH_CREATE_FAILED = 'No se pudo crear la partida. Por favor, intenta nuevamente.'


@pages.route('/', methods=['GET', 'POST'])
def home():
    if current_user.is_authenticated:
        return redirect(url_for('pages.game'))
    if request.method == 'POST':
        username = (request.form.get('username') or '').strip()
        if not username:
            flash('Ingresa un nombre de usuario.')
            return render_template('home.html'), 400
        _, token = issue_guest_session(username)
        return set_session_cookie(redirect(url_for('pages.game')), token)
    return render_template('home.html')


@pages.route('/game')
@login_required
def game():
    match = find_open_match(current_user.id)
    limit = int(current_app.config.get('LEADERBOARD_SIZE', 10))
    return render_template(
        'game.html',
        username=current_user.username,
        match_id_joined=match.id if match else -1,
        top_players=top_players(limit),
    )


@pages.route('/game/play', methods=['POST'])
@login_required
def play():
    try:
        match, _ = create_or_join_match(current_user)
    except Exception:
        current_app.logger.exception(f"[match] create failed for user={current_user.id}")
        db.session.rollback()
        flash(MATCH_CREATE_FAILED, 'error')
        return redirect(url_for('pages.game'))
    return redirect(url_for('pages.match_page', match_id=match.id))


@pages.route('/match/<int:match_id>')
def match_page(match_id):
    match = db.get_or_404(Match, match_id)
    return render_template('match.html', match=match)
