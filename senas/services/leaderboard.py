from senas.models import GuestUser


def top_players(limit: int = 10):
    """Players who have scored, highest first.

    Equal scores keep whatever order the database returns.
    """
    rows = (
        GuestUser.query
        .filter(GuestUser.score > 0)
        .order_by(GuestUser.score.desc())
        .limit(limit)
        .all()
    )
    return [{'username': u.username, 'score': u.score} for u in rows]
