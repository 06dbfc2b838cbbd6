from typing import Optional, Tuple

from flask import current_app

from senas import db, socketio
from senas.models import (
    GuestUser,
    Match,
    MATCH_FINISHED,
    MATCH_PLAYING,
    MATCH_WAITING,
    OPEN_MATCH_STATES,
)


class MatchError(Exception):
    """A match operation refused for a reason the caller should report."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


def notify_match_update(match: Match) -> None:
    socketio.emit('match_update', {'match': match.to_dict()}, to=f"match:{match.id}", namespace='/ws')


def find_open_match(user_id: int) -> Optional[Match]:
    """The match (waiting or playing) this user currently sits in, if any."""
    return (
        Match.query
        .filter(Match.state.in_(OPEN_MATCH_STATES))
        .filter((Match.player1_id == user_id) | (Match.player2_id == user_id))
        .order_by(Match.id.desc())
        .first()
    )


def create_or_join_match(user: GuestUser) -> Tuple[Match, bool]:
    """Put the user in a match and return ``(match, created)``.

    An existing open match is returned as is. Otherwise the oldest waiting
    match opened by someone else is joined, and failing that a new waiting
    match is created with the user in the first slot.
    """
    existing = find_open_match(user.id)
    if existing:
        return existing, False

    waiting = (
        Match.query
        .filter_by(state=MATCH_WAITING, player2_id=None)
        .filter(Match.player1_id != user.id)
        .order_by(Match.id.asc())
        .first()
    )
    if waiting:
        waiting.player2_id = user.id
        waiting.state = MATCH_PLAYING
        db.session.add(waiting)
        db.session.commit()
        current_app.logger.info(f"[match] joined id={waiting.id} by user={user.id}")
        notify_match_update(waiting)
        return waiting, False

    match = Match(player1_id=user.id, state=MATCH_WAITING)
    db.session.add(match)
    db.session.commit()
    current_app.logger.info(f"[match] created id={match.id} by user={user.id}")
    return match, True


def finish_match(match: Match, user: GuestUser, winner_id) -> Match:
    """Close a playing match and credit the winner with one point."""
    if not match.has_player(user.id):
        raise MatchError('You are not a player in this match', 403)
    if match.state != MATCH_PLAYING:
        raise MatchError(f'Match is {match.state}, not playing', 409)
    try:
        winner_id = int(winner_id)
    except (TypeError, ValueError):
        raise MatchError('winnerId is required')
    if not match.has_player(winner_id):
        raise MatchError('Winner must be a player in this match')

    winner = db.session.get(GuestUser, winner_id)
    winner.score = (winner.score or 0) + 1
    match.state = MATCH_FINISHED
    match.winner_id = winner_id
    db.session.add_all([winner, match])
    db.session.commit()
    current_app.logger.info(f"[match] finished id={match.id} winner={winner_id}")
    notify_match_update(match)
    return match
