import unittest

from tempsdejeu.models import BeneficiaryTeam, Interval, Period, StoppageEvent, StoppageType
from tempsdejeu.services import StoppageLedger


class StoppageLedgerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ledger = StoppageLedger([
            StoppageEvent(Period.FIRST_HALF, StoppageType.INJURY, start_time=300, duration=90),
            StoppageEvent(Period.FIRST_HALF, StoppageType.CORNER, start_time=600, duration=25,
                          beneficiary_team=BeneficiaryTeam.HOME),
            StoppageEvent(Period.FIRST_HALF, StoppageType.SUBSTITUTION, start_time=1200, duration=40),
            StoppageEvent(Period.SECOND_HALF, StoppageType.CORNER, start_time=100, duration=35,
                          beneficiary_team=BeneficiaryTeam.AWAY),
            StoppageEvent(Period.SECOND_HALF, StoppageType.VAR, start_time=900, duration=130),
        ])

    def test_empty_ledger_yields_zero(self) -> None:
        ledger = StoppageLedger()
        self.assertEqual(ledger.total_stoppage_time(), 0)
        self.assertEqual(ledger.total_stoppage_time(Period.FIRST_HALF), 0)
        self.assertEqual(ledger.total_time(StoppageType.VAR), 0)
        self.assertEqual(ledger.stoppage_count(StoppageType.VAR), 0)
        self.assertEqual(ledger.suggested_added_time(Period.FIRST_HALF), 0)
        self.assertEqual(ledger.breakdown(), [])

    def test_totals_per_period_and_match(self) -> None:
        self.assertEqual(self.ledger.total_stoppage_time(Period.FIRST_HALF), 155)
        self.assertEqual(self.ledger.total_stoppage_time(Period.SECOND_HALF), 165)
        self.assertEqual(self.ledger.total_stoppage_time(), 320)
        self.assertEqual(self.ledger.total_stoppage_time(Period.EXTRA_FIRST_HALF), 0)

    def test_filtered_aggregates(self) -> None:
        self.assertEqual(self.ledger.stoppage_count(StoppageType.CORNER), 2)
        self.assertEqual(self.ledger.stoppage_count(StoppageType.CORNER, BeneficiaryTeam.HOME), 1)
        self.assertEqual(self.ledger.total_time(StoppageType.CORNER), 60)
        self.assertEqual(self.ledger.total_time(StoppageType.CORNER, BeneficiaryTeam.AWAY), 35)
        self.assertEqual(self.ledger.stoppage_count(StoppageType.INJURY, BeneficiaryTeam.HOME), 0)

    def test_overlapping_stoppages_are_summed(self) -> None:
        ledger = StoppageLedger([
            StoppageEvent(Period.FIRST_HALF, StoppageType.INJURY, start_time=100, duration=60),
            StoppageEvent(Period.FIRST_HALF, StoppageType.VAR, start_time=130, duration=60),
        ])
        self.assertEqual(ledger.total_stoppage_time(Period.FIRST_HALF), 120)

    def test_suggested_added_time_rounds_up_to_minute(self) -> None:
        # 155s -> 3 minutes
        self.assertEqual(self.ledger.suggested_added_minutes(Period.FIRST_HALF), 3)
        self.assertEqual(self.ledger.suggested_added_time(Period.FIRST_HALF), 180)

        exact = StoppageLedger([
            StoppageEvent(Period.FIRST_HALF, StoppageType.INJURY, start_time=0, duration=120),
        ])
        self.assertEqual(exact.suggested_added_time(Period.FIRST_HALF), 120)
        self.assertEqual(exact.suggested_added_minutes(Period.FIRST_HALF), 2)

    def test_regulatory_added_time_counts_selected_types(self) -> None:
        # injury 90 + one substitution allowance of 30; the corner is ignored
        self.assertEqual(self.ledger.regulatory_added_time(Period.FIRST_HALF), 120)
        self.assertEqual(self.ledger.regulatory_added_time(Period.SECOND_HALF), 130)

    def test_negative_duration_is_clamped(self) -> None:
        ledger = StoppageLedger([
            StoppageEvent(Period.FIRST_HALF, StoppageType.OTHER, start_time=10, duration=-50),
        ])
        self.assertEqual(ledger.total_stoppage_time(), 0)

    def test_stoppage_intervals_skip_empty_stoppages(self) -> None:
        ledger = StoppageLedger([
            StoppageEvent(Period.FIRST_HALF, StoppageType.INJURY, start_time=100, duration=60),
            StoppageEvent(Period.FIRST_HALF, StoppageType.OTHER, start_time=500, duration=0),
        ])
        self.assertEqual(ledger.stoppage_intervals(Period.FIRST_HALF), [Interval(100, 160)])

    def test_breakdown_lists_types_in_catalogue_order(self) -> None:
        rows = self.ledger.breakdown()
        self.assertEqual([row.type for row in rows], ["corner", "substitution", "injury", "var"])
        corner = rows[0]
        self.assertEqual(corner.count, 2)
        self.assertEqual(corner.home_count, 1)
        self.assertEqual(corner.home_seconds, 25)
        self.assertEqual(corner.away_count, 1)
        self.assertEqual(corner.away_seconds, 35)


if __name__ == "__main__":
    unittest.main()
