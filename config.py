import os


def _database_uri():
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    host = os.environ.get('DB_HOST', 'localhost')
    user = os.environ.get('DB_USER', 'root')
    password = os.environ.get('DB_PASSWORD', '')
    name = os.environ.get('DB_NAME', 'senas')
    return f'mysql+pymysql://{user}:{password}@{host}/{name}'


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Guest sessions: no default secret, issuing a session without one is a config error
    GUEST_SESSION_JWT_SECRET = os.environ.get('GUEST_SESSION_JWT_SECRET')
    GUEST_SESSION_COOKIE = 'guest_session_token'
    GUEST_SESSION_TTL_SEC = int(os.environ.get('GUEST_SESSION_TTL_SEC', '3600'))
    # Avatar icons are numbered 1..AVATAR_COUNT
    AVATAR_COUNT = int(os.environ.get('AVATAR_COUNT', '10'))
    AVATAR_SEED = os.environ.get('AVATAR_SEED')
    LEADERBOARD_SIZE = int(os.environ.get('LEADERBOARD_SIZE', '10'))
