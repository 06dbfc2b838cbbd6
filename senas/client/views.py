import logging
from typing import Callable, List, Optional

import httpx

from .api import ApiClient
from .contexts import NOT_IN_MATCH as NO_MATCH_ID, GuestUserContext, MatchContext

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "Este es nuestro juego de memoria en lengua de señas, donde vas a combatir "
    "contra otro jugador en tiempo real, para jugar presiona el botón Buscar Partida."
)
EMPTY_LEADERBOARD = "No hay jugadores en el leaderboard aún."
MATCH_CREATE_FAILED = "No se pudo crear la partida. Por favor, intenta nuevamente."
JOIN_LABEL = "Unirse a partida en curso"
SEARCH_LABEL = "Buscar partida"


def info_card(title: str, content: str) -> str:
    return f"{title}\n{content}"


class Leaderboard:
    def __init__(self, api: ApiClient):
        self.api = api
        self.top_players: List[dict] = []

    def fetch(self) -> List[dict]:
        try:
            res = self.api.get("/api/leaderboard")
        except httpx.HTTPError as exc:
            logger.warning("leaderboard fetch failed: %s", exc)
            return self.top_players
        if not res.is_success:
            return self.top_players
        try:
            players = res.json()["topPlayers"] or []
            self.top_players = [{"username": p["username"], "score": p["score"]} for p in players]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("unreadable leaderboard response: %r", exc)
        return self.top_players

    def render(self) -> str:
        lines = ["Leaderboard"]
        if not self.top_players:
            lines.append(EMPTY_LEADERBOARD)
        for player in self.top_players:
            lines.append(f"{player['username']}: {player['score']}")
        return "\n".join(lines)


class GameView:
    """The game screen: welcome header, match button, leaderboard.

    ``navigate`` receives a path such as ``/match/42``; ``show_error``
    receives a title and a message and stands in for a blocking dialog.
    """

    UNKNOWN = "unknown"
    NOT_IN_MATCH = "not-in-match"
    IN_MATCH = "in-match"
    NAVIGATING = "navigating"

    def __init__(
        self,
        guest: GuestUserContext,
        matches: MatchContext,
        leaderboard: Leaderboard,
        navigate: Callable[[str], None],
        show_error: Callable[[str, str], None],
    ):
        self.guest = guest
        self.matches = matches
        self.leaderboard = leaderboard
        self.navigate = navigate
        self.show_error = show_error
        self.match_id_joined: Optional[int] = None
        self.navigating = False

    @property
    def phase(self) -> str:
        if self.navigating:
            return self.NAVIGATING
        if self.match_id_joined is None:
            return self.UNKNOWN
        if self.match_id_joined == NO_MATCH_ID:
            return self.NOT_IN_MATCH
        return self.IN_MATCH

    @property
    def button_label(self) -> str:
        return JOIN_LABEL if self.match_id_joined not in (None, NO_MATCH_ID) else SEARCH_LABEL

    def mount(self):
        # Neither fetch depends on the other
        self.match_id_joined = self.guest.verify_if_in_match()
        self.leaderboard.fetch()

    def on_match_button_click(self) -> Optional[str]:
        """Returns the path navigated to, or None if creation failed."""
        if self.match_id_joined is not None and self.match_id_joined != NO_MATCH_ID:
            return self._go(f"/match/{self.match_id_joined}")

        match_id = self.matches.create_match()
        if match_id:
            return self._go(f"/match/{match_id}")
        self.show_error("Error", MATCH_CREATE_FAILED)
        return None

    def _go(self, path: str) -> str:
        self.navigating = True
        self.navigate(path)
        return path

    def render(self) -> str:
        username = self.guest.guest_user.username if self.guest.guest_user else ""
        return "\n\n".join([
            info_card(f"Bienvenido, {username}!", WELCOME_TEXT),
            f"[ {self.button_label} ]",
            self.leaderboard.render(),
        ])
