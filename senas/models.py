from datetime import datetime, timezone

from flask_login import UserMixin

from senas import db

MATCH_WAITING = 'waiting'
MATCH_PLAYING = 'playing'
MATCH_FINISHED = 'finished'
OPEN_MATCH_STATES = (MATCH_WAITING, MATCH_PLAYING)


def _utcnow():
    return datetime.now(timezone.utc)


class GuestUser(UserMixin, db.Model):
    __tablename__ = 'guest_users'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.String(64), nullable=False)
    profile_icon_number = db.Column(db.Integer, nullable=False)
    score = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_dict(self):
        return {
            'userId': self.id,
            'username': self.username,
            'avatarIndex': self.profile_icon_number,
        }


class Match(db.Model):
    __tablename__ = 'matches'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    state = db.Column(db.String(16), default=MATCH_WAITING, nullable=False, index=True) # waiting, playing, finished
    player1_id = db.Column(db.Integer, db.ForeignKey('guest_users.id'), nullable=False)
    player2_id = db.Column(db.Integer, db.ForeignKey('guest_users.id'), nullable=True)
    winner_id = db.Column(db.Integer, db.ForeignKey('guest_users.id'), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)

    player1 = db.relationship('GuestUser', foreign_keys=[player1_id])
    player2 = db.relationship('GuestUser', foreign_keys=[player2_id])

    @property
    def is_open(self):
        return self.state in OPEN_MATCH_STATES

    def has_player(self, user_id):
        return user_id is not None and user_id in (self.player1_id, self.player2_id)

    def to_dict(self):
        return {
            'matchId': str(self.id),
            'state': self.state,
            'player1id': str(self.player1_id),
            'player2id': str(self.player2_id) if self.player2_id is not None else None,
        }
