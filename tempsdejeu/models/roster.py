"""
Match roster model for the Temps De Jeu statistics engine.

A :class:`MatchRosterEntry` is one player selected for a given match, with the
shirt number, position and status used for that match.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ..utils.constants import POS_SHORT


class PlayerPosition(Enum):
    """Playing position."""
    GOALKEEPER = "goalkeeper"
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    FORWARD = "forward"

    @property
    def short_name(self) -> str:
        return POS_SHORT[self.value]


class PlayerStatus(Enum):
    """
    Player status for a match.

    Live flows update the status as the match unfolds (a substituted player
    becomes ``REMPLACANT``, a sent-off player ``EXPELLED``), so the status of a
    finished match does not always describe who started.
    """
    TITULAIRE = "titulaire"
    REMPLACANT = "remplacant"
    EXPELLED = "expelled"
    TEMP_EXPELLED = "temp_expelled"

    @property
    def started_on_field(self) -> bool:
        """Whether this status implies the player was on the field at kick-off."""
        return self is not PlayerStatus.REMPLACANT


@dataclass
class MatchRosterEntry:
    """
    One player of the match squad.

    Attributes:
        player_id: Stable identity of the player
        shirt_number: Shirt number worn for this match
        first_name: Player's first name
        last_name: Player's last name
        position: Playing position
        status: Titulaire, remplaçant or expelled
    """
    player_id: str
    shirt_number: int = 0
    first_name: str = ""
    last_name: str = ""
    position: PlayerPosition = PlayerPosition.MIDFIELDER
    status: PlayerStatus = PlayerStatus.REMPLACANT

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        """Name shown in tables, falling back to the shirt number."""
        return self.full_name or f"Joueur #{self.shirt_number}"

    @property
    def short_name(self) -> str:
        """Initial and last name, e.g. ``K. Mbappé``."""
        if not self.first_name and not self.last_name:
            return f"Joueur #{self.shirt_number}"
        if not self.last_name:
            return self.first_name
        return f"{self.first_name[:1]}. {self.last_name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "shirt_number": self.shirt_number,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchRosterEntry":
        return cls(
            player_id=str(data["player_id"]),
            shirt_number=int(data.get("shirt_number", 0) or 0),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            position=PlayerPosition(data.get("position", PlayerPosition.MIDFIELDER.value)),
            status=PlayerStatus(data.get("status", PlayerStatus.REMPLACANT.value)),
        )
