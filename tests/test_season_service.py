"""Tests for season aggregation."""

import pytest

from tempsdejeu.models import (
    CardEvent, CardType, GoalEvent, MatchRecord, MatchRosterEntry, Period,
    PlayerStatus, StoppageEvent, StoppageType, SubstitutionEvent
)
from tempsdejeu.services import SeasonAnalyticsService


def roster():
    return [
        MatchRosterEntry("gk", shirt_number=1, first_name="Hugo", status=PlayerStatus.TITULAIRE),
        MatchRosterEntry("st", shirt_number=9, first_name="Olivier", status=PlayerStatus.TITULAIRE),
        MatchRosterEntry("sub", shirt_number=12, first_name="Marcus", status=PlayerStatus.REMPLACANT),
    ]


def finished_match(match_id, is_home, goals, substitutions=(), stoppages=()):
    return MatchRecord(
        id=match_id,
        home_team="A",
        away_team="B",
        is_my_team_home=is_home,
        is_finished=True,
        period_durations={Period.FIRST_HALF: 2700, Period.SECOND_HALF: 2700},
        roster=roster(),
        stoppages=list(stoppages),
        substitutions=list(substitutions),
        goals=goals,
        cards=[CardEvent(Period.FIRST_HALF, 100, CardType.YELLOW, player_id="st", player_name="Olivier")],
    )


@pytest.fixture
def records():
    first = finished_match(
        "m1",
        True,
        [GoalEvent(Period.FIRST_HALF, 600, True, player_name="Olivier"),
         GoalEvent(Period.SECOND_HALF, 600, False, player_name="Rival")],
        substitutions=[SubstitutionEvent(Period.SECOND_HALF, 1700, player_out_id="st", player_in_id="sub")],
        stoppages=[StoppageEvent(Period.FIRST_HALF, StoppageType.INJURY, start_time=100, duration=300)],
    )
    second = finished_match(
        "m2",
        False,
        [GoalEvent(Period.FIRST_HALF, 300, False, player_name="Olivier"),
         GoalEvent(Period.SECOND_HALF, 900, False, player_name="Marcus")],
        stoppages=[StoppageEvent(Period.SECOND_HALF, StoppageType.CORNER, start_time=50, duration=60)],
    )
    live = MatchRecord(id="m3", is_finished=False, period_durations={Period.FIRST_HALF: 2700}, roster=roster())
    return [first, second, live]


def test_unfinished_matches_are_ignored(records):
    service = SeasonAnalyticsService(records)
    assert [r.id for r in service.records] == ["m1", "m2"]


def test_season_report_totals(records):
    report = SeasonAnalyticsService(records).generate_season_report()

    assert report.matches_played == 2
    assert report.total_duration == 4 * 2700
    assert report.total_effective_time == 4 * 2700 - 360
    assert report.average_effective_time == (4 * 2700 - 360) / 2
    expected_percentage = (100.0 * (5400 - 300) / 5400 + 100.0 * (5400 - 60) / 5400) / 2
    assert report.average_effective_percentage == pytest.approx(expected_percentage)
    assert report.total_stoppages == 2
    assert [row.type for row in report.stoppage_breakdown] == ["corner", "injury"]
    assert report.card_counts["yellow"] == 2


def test_season_goals_follow_my_team_side(records):
    report = SeasonAnalyticsService(records).generate_season_report()
    assert report.my_goals == 3
    assert report.opponent_goals == 1
    assert [(s.name, s.goals) for s in report.top_scorers] == [("Olivier", 2), ("Marcus", 1)]


def test_player_totals(records):
    totals = {t.player_id: t for t in SeasonAnalyticsService(records).player_totals()}

    assert totals["gk"].matches_played == 2
    assert totals["gk"].matches_started == 2
    assert totals["gk"].total_time == 2 * 5400
    assert totals["st"].total_time == 5400 + 2700 + 1700
    assert totals["sub"].matches_played == 1
    assert totals["sub"].matches_started == 0
    assert totals["sub"].total_time == 1000

    ordered = [t.player_id for t in SeasonAnalyticsService(records).player_totals()]
    assert ordered == ["gk", "st", "sub"]


def test_empty_season():
    report = SeasonAnalyticsService([]).generate_season_report()
    assert report.matches_played == 0
    assert report.average_effective_time == 0
    assert report.average_effective_percentage == 0
    assert report.player_totals == []
