"""Python client for the Memoria de Señas server.

Mirrors the browser's state holders: a guest user context, a match
context, and the game view that ties them to navigation.
"""

from .api import ApiClient
from .contexts import GuestUser, GuestUserContext, Match, MatchContext, MatchState, NOT_IN_MATCH
from .views import GameView, Leaderboard
