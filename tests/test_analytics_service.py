"""Tests for match statistics reporting."""

import pytest

from tempsdejeu.models import (
    CardEvent, CardType, GoalEvent, MatchRecord, MatchRosterEntry, Period,
    PlayerPlayingTime, PlayerStatus, StoppageEvent, StoppageType, SubstitutionEvent
)
from tempsdejeu.services import MatchAnalyticsService


def build_record(**overrides):
    roster = [
        MatchRosterEntry(f"p{n}", shirt_number=n, first_name="Joueur", last_name=str(n),
                         status=PlayerStatus.TITULAIRE if n <= 11 else PlayerStatus.REMPLACANT)
        for n in range(1, 15)
    ]
    values = dict(
        id="match-1",
        home_team="US Example",
        away_team="FC Visiteurs",
        is_finished=True,
        period_durations={Period.FIRST_HALF: 2700, Period.SECOND_HALF: 2820},
        roster=roster,
        stoppages=[
            StoppageEvent(Period.FIRST_HALF, StoppageType.INJURY, start_time=1000, duration=120),
            StoppageEvent(Period.SECOND_HALF, StoppageType.CORNER, start_time=400, duration=30),
        ],
        substitutions=[SubstitutionEvent(Period.SECOND_HALF, 1200, player_out_id="p9", player_in_id="p12")],
        cards=[CardEvent(Period.FIRST_HALF, 600, CardType.YELLOW, player_name="Joueur 4", player_id="p4")],
        goals=[
            GoalEvent(Period.FIRST_HALF, 300, True, player_name="Joueur 9"),
            GoalEvent(Period.SECOND_HALF, 900, False, player_name="Adversaire"),
        ],
    )
    values.update(overrides)
    return MatchRecord(**values)


def test_single_stoppage_reduces_effective_time():
    record = build_record(
        period_durations={Period.FIRST_HALF: 2700},
        stoppages=[StoppageEvent(Period.FIRST_HALF, StoppageType.INJURY, start_time=1000, duration=120)],
        substitutions=[],
    )
    analytics = MatchAnalyticsService(record)

    assert analytics.total_effective_play_time() == 2580
    first_half = analytics.generate_match_report().periods[0]
    assert first_half.suggested_added_seconds == 120
    assert first_half.suggested_added_minutes == 2


def test_empty_match_has_zero_percentage():
    analytics = MatchAnalyticsService(MatchRecord(id="empty"))

    assert analytics.total_match_duration() == 0
    assert analytics.effective_percentage() == 0
    report = analytics.generate_match_report()
    assert report.players == []
    assert report.periods == []
    assert report.unfinished_periods == [p.value for p in Period.ordered()]


def test_report_totals():
    analytics = MatchAnalyticsService(build_record())
    report = analytics.generate_match_report()

    assert report.match_id == "match-1"
    assert report.label == "US Example - FC Visiteurs"
    assert report.total_duration == 2700 + 2820
    assert report.total_stoppage_time == 150
    assert report.total_effective_time == (2700 - 120) + (2820 - 30)
    assert report.effective_percentage == pytest.approx(100.0 * 5370 / 5520)
    assert report.total_effective_time + report.total_stoppage_time == report.total_duration
    assert [row.type for row in report.stoppage_breakdown] == ["corner", "injury"]


def test_report_players_and_flags():
    report = MatchAnalyticsService(build_record()).generate_match_report()

    players = {row.player_id: row for row in report.players}
    assert players["p9"].total_time == 2700 + 1200
    assert players["p12"].total_time == 1620
    assert players["p12"].bench_time == 2700 + 1200
    assert sum(row.total_time for row in report.players) == (2700 + 2820) * 11

    assert report.ended_periods == ["first_half", "second_half"]
    assert report.unfinished_periods == ["extra_first_half", "extra_second_half"]

    assert report.cards.total == 1
    assert report.cards.counts["yellow"] == 1
    assert report.goals.my_goals == 1
    assert report.goals.opponent_goals == 1
    assert [s.name for s in report.goals.top_scorers] == ["Joueur 9"]


def test_played_only_drops_unused_substitutes():
    report = MatchAnalyticsService(build_record()).generate_match_report(played_only=True)
    assert {row.player_id for row in report.players} == {f"p{n}" for n in range(1, 13)}


def test_live_match_uses_running_clock():
    record = build_record(
        is_finished=False,
        current_period=Period.SECOND_HALF,
        period_durations={Period.FIRST_HALF: 2700},
        substitutions=[],
    )
    analytics = MatchAnalyticsService(record, live_elapsed=600)

    assert analytics.total_match_duration() == 3300
    assert analytics.ended_periods() == [Period.FIRST_HALF]
    assert Period.SECOND_HALF in analytics.unfinished_periods()
    report = analytics.generate_match_report()
    assert report.current_period == "second_half"
    assert not report.is_finished


def test_report_is_idempotent():
    record = build_record()
    analytics = MatchAnalyticsService(record)
    before = record.to_json()

    assert analytics.generate_match_report() == analytics.generate_match_report()
    assert record.to_json() == before


class _FixedPlayingTime:
    def player_playing_times(self, played_only=False):
        return [PlayerPlayingTime("x", "Injected", 1, "forward", True, 10.0, 9.0, 0.0)]


def test_injected_playing_time_provider():
    analytics = MatchAnalyticsService(build_record(), playing_time=_FixedPlayingTime())
    report = analytics.generate_match_report()
    assert [row.player_name for row in report.players] == ["Injected"]
