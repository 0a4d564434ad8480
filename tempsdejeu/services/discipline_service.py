"""Card and goal summaries for the Temps De Jeu statistics engine."""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from ..models import (
    CardEvent, CardSummary, CardType, GoalEvent, GoalSummary, PlayerCardSummary, ScorerSummary
)
from ..utils import DEFAULT_RANKING_LIMIT


def card_counts(cards: Iterable[CardEvent]) -> Dict[str, int]:
    """Count cards per type; every type is present, zero when unused."""
    counter = Counter(card.type.value for card in cards)
    return {card_type.value: counter.get(card_type.value, 0) for card_type in CardType}


def top_scorers(goals: Iterable[GoalEvent], limit: int = DEFAULT_RANKING_LIMIT) -> List[ScorerSummary]:
    """Named scorers by goal count, then name."""
    counter = Counter(goal.player_name for goal in goals if goal.player_name)
    ranked = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    return [ScorerSummary(name=name, goals=count) for name, count in ranked[:limit]]


class DisciplineService:
    """
    Summaries over the card and goal lists of a match.

    Served cards are kept in the record with ``is_served`` set. Historical
    figures count them; the active card list leaves them out.
    """

    def __init__(
        self,
        cards: Iterable[CardEvent],
        goals: Iterable[GoalEvent],
        is_my_team_home: bool = True,
    ) -> None:
        self._cards: List[CardEvent] = list(cards)
        self._goals: List[GoalEvent] = list(goals)
        self._is_my_team_home = is_my_team_home

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------
    def active_cards(self) -> List[CardEvent]:
        return [card for card in self._cards if not card.is_served]

    def card_counts(self, active_only: bool = False) -> Dict[str, int]:
        return card_counts(self.active_cards() if active_only else self._cards)

    def cards_for_player(self, player_id: Optional[str] = None, player_name: str = "") -> List[CardEvent]:
        """Cards of one player, matched by id when given, by name otherwise."""
        if player_id:
            return [card for card in self._cards if card.player_id == player_id]
        return [card for card in self._cards if card.player_name == player_name]

    def card_ranking(self, limit: int = DEFAULT_RANKING_LIMIT) -> List[PlayerCardSummary]:
        """Most carded players first, served cards included."""
        grouped: Dict[str, List[CardEvent]] = {}
        for card in self._cards:
            key = card.player_id or f"name:{card.player_name}"
            grouped.setdefault(key, []).append(card)

        ranking = [
            PlayerCardSummary(
                player_key=key,
                player_name=cards[0].player_name,
                total=len(cards),
                counts=card_counts(cards),
            )
            for key, cards in grouped.items()
        ]
        ranking.sort(key=lambda item: (-item.total, item.player_name))
        return ranking[:limit]

    def card_summary(self) -> CardSummary:
        return CardSummary(
            total=len(self._cards),
            counts=self.card_counts(),
            active_counts=self.card_counts(active_only=True),
            ranking=self.card_ranking(),
            expulsions=sum(1 for card in self._cards if card.type.is_expulsion),
            temporary_suspension_seconds=sum(
                card.type.suspension_seconds or 0 for card in self._cards
                if card.type.is_temporary_expulsion
            ),
        )

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------
    def my_goals(self) -> List[GoalEvent]:
        return [goal for goal in self._goals if goal.is_home == self._is_my_team_home]

    def top_scorers(self, limit: int = DEFAULT_RANKING_LIMIT) -> List[ScorerSummary]:
        """Named scorers of my team."""
        return top_scorers(self.my_goals(), limit)

    def goal_summary(self) -> GoalSummary:
        home = sum(1 for goal in self._goals if goal.is_home)
        away = len(self._goals) - home
        mine = home if self._is_my_team_home else away
        return GoalSummary(
            home_goals=home,
            away_goals=away,
            my_goals=mine,
            opponent_goals=len(self._goals) - mine,
            top_scorers=self.top_scorers(),
        )
