"""
Client-side state holders for the guest user and the current match.

Neither context raises on HTTP failures: a failed request leaves the
state absent and the caller sees an empty result.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .api import ApiClient

logger = logging.getLogger(__name__)

NOT_IN_MATCH = -1


@dataclass(frozen=True)
class GuestUser:
    user_id: int
    username: str
    avatar_index: int

    @classmethod
    def from_dict(cls, data: dict) -> "GuestUser":
        return cls(
            user_id=int(data["userId"]),
            username=data["username"],
            avatar_index=int(data["avatarIndex"]),
        )


@dataclass(frozen=True)
class Match:
    match_id: str
    state: str  # waiting, playing, finished
    player1_id: str
    player2_id: Optional[str]

    @classmethod
    def from_dict(cls, data: dict) -> "Match":
        return cls(
            match_id=str(data["matchId"]),
            state=data["state"],
            player1_id=str(data["player1id"]),
            player2_id=str(data["player2id"]) if data.get("player2id") is not None else None,
        )


@dataclass(frozen=True)
class MatchState:
    """Unknown (never loaded), absent, or present with a match."""

    kind: str
    match: Optional[Match] = None

    UNKNOWN = "unknown"
    ABSENT = "absent"
    PRESENT = "present"

    @classmethod
    def unknown(cls) -> "MatchState":
        return cls(cls.UNKNOWN)

    @classmethod
    def absent(cls) -> "MatchState":
        return cls(cls.ABSENT)

    @classmethod
    def present(cls, match: Match) -> "MatchState":
        return cls(cls.PRESENT, match)


class GuestUserContext:
    def __init__(self, api: ApiClient):
        self.api = api
        self.guest_user: Optional[GuestUser] = None

    def start_session(self, username: str) -> bool:
        try:
            res = self.api.post("/api/start-guest-session", json={"username": username})
        except httpx.HTTPError as exc:
            logger.warning("start-guest-session failed: %s", exc)
            return False
        if not res.is_success:
            logger.info("start-guest-session refused with %s", res.status_code)
            return False
        return self.load() is not None

    def load(self) -> Optional[GuestUser]:
        try:
            res = self.api.get("/api/guest-session")
        except httpx.HTTPError as exc:
            logger.warning("guest-session lookup failed: %s", exc)
            self.guest_user = None
            return None
        self.guest_user = None
        if res.is_success:
            try:
                self.guest_user = GuestUser.from_dict(res.json())
            except (ValueError, KeyError, TypeError) as exc:
                logger.warning("unreadable guest-session response: %r", exc)
        return self.guest_user

    def verify_if_in_match(self) -> int:
        """Id of the open match this guest is in, or NOT_IN_MATCH."""
        try:
            res = self.api.get("/api/match/current")
        except httpx.HTTPError as exc:
            logger.warning("match membership check failed: %s", exc)
            return NOT_IN_MATCH
        if not res.is_success:
            return NOT_IN_MATCH
        try:
            return int(res.json()["matchId"])
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("unreadable current-match response: %r", exc)
            return NOT_IN_MATCH


class MatchContext:
    def __init__(self, api: ApiClient):
        self.api = api
        self.match = MatchState.unknown()

    def create_match(self) -> str:
        """Create or join a match; returns its id, or "" on any failure."""
        try:
            res = self.api.post("/api/match/create")
        except httpx.HTTPError as exc:
            logger.warning("match creation failed: %s", exc)
            return ""
        if not res.is_success:
            logger.info("match creation refused with %s", res.status_code)
            return ""
        try:
            match = Match.from_dict(res.json())
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("unreadable match response: %r", exc)
            return ""
        self.match = MatchState.present(match)
        return match.match_id
