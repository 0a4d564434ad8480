"""Tests for periods, stoppage types and cards."""

from tempsdejeu.models import CardType, Period, StoppageType, SubstitutionEvent


def test_period_order_and_regulation():
    assert [p.short_name for p in Period.ordered()] == ["MT1", "MT2", "PR1", "PR2"]
    assert Period.FIRST_HALF.regulation_duration == 2700
    assert Period.EXTRA_SECOND_HALF.regulation_duration == 900


def test_stoppage_type_catalogue():
    counted = [t for t in StoppageType if t.counts_for_added_time]
    assert counted == [StoppageType.INJURY, StoppageType.VAR, StoppageType.TIME_WASTING]

    assert StoppageType.CORNER.requires_team_selection
    assert StoppageType.TIME_WASTING.requires_team_selection
    assert not StoppageType.INJURY.requires_team_selection
    assert not StoppageType.SUBSTITUTION.requires_team_selection

    assert StoppageType.PENALTY.chainable_types == [
        StoppageType.GOAL, StoppageType.INJURY, StoppageType.SUBSTITUTION
    ]
    assert StoppageType.CORNER.chainable_types == []


def test_card_suspensions():
    assert CardType.RED.is_expulsion
    assert CardType.SECOND_YELLOW.is_expulsion
    assert CardType.RED.suspension_seconds is None
    assert CardType.WHITE.is_temporary_expulsion
    assert CardType.WHITE.suspension_seconds == 600
    assert CardType.YELLOW.suspension_seconds == 0


def test_substitution_round_trip_keeps_ids():
    event = SubstitutionEvent(Period.SECOND_HALF, 1200, "Alice", "Zoe", "p3", "p15")
    restored = SubstitutionEvent.from_dict(event.to_dict())
    assert restored == event
    assert restored.fingerprint() == event.fingerprint()
