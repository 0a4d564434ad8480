"""
Interval model for the Temps De Jeu statistics engine.

An :class:`Interval` is a half-open range ``[start, end)`` on a period clock,
in seconds from the start of the period. The end may be left unset while the
range is still running (player still on the field, period still in play); its
length is then measured against a reference time supplied by the caller.
"""
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Interval:
    """
    Half-open time range on a period clock.

    Attributes:
        start: Seconds from period start when the range opens
        end: Seconds from period start when the range closes, None while open
    """
    start: float
    end: Optional[float] = None

    def __post_init__(self) -> None:
        # Frozen dataclass: clamp through object.__setattr__
        object.__setattr__(self, "start", max(0.0, float(self.start)))
        if self.end is not None:
            object.__setattr__(self, "end", max(self.start, float(self.end)))

    @property
    def is_open(self) -> bool:
        return self.end is None

    def resolved_end(self, reference: Optional[float] = None) -> float:
        """
        Return the effective end of the interval.

        Args:
            reference: "now" or period end used when the interval is open

        Returns:
            Closing time, never before ``start``
        """
        if self.end is not None:
            return self.end
        if reference is None:
            return self.start
        return max(self.start, float(reference))

    def duration(self, reference: Optional[float] = None) -> float:
        """
        Length of the interval in seconds.

        Args:
            reference: Required for open intervals; an open interval with no
                reference has zero length

        Returns:
            Non-negative duration in seconds
        """
        return self.resolved_end(reference) - self.start

    def close(self, end: float) -> "Interval":
        """Return a closed copy ending at ``end``."""
        return Interval(self.start, end)

    def overlaps(self, other: "Interval", reference: Optional[float] = None) -> bool:
        """True when both ranges share a positive amount of time."""
        return self.intersection(other, reference) is not None

    def intersection(
        self, other: "Interval", reference: Optional[float] = None
    ) -> Optional["Interval"]:
        """
        Overlapping part of two intervals.

        Returns:
            A closed interval, or None when the ranges do not overlap
        """
        start = max(self.start, other.start)
        end = min(self.resolved_end(reference), other.resolved_end(reference))
        if end <= start:
            return None
        return Interval(start, end)

    def subtract(self, other: "Interval", reference: Optional[float] = None) -> List["Interval"]:
        """
        Interval difference ``self - other``.

        Returns:
            Zero, one or two closed intervals covering the part of ``self``
            that ``other`` does not
        """
        own_end = self.resolved_end(reference)
        overlap = self.intersection(other, reference)
        if overlap is None:
            if own_end <= self.start:
                return []
            return [Interval(self.start, own_end)]

        pieces: List[Interval] = []
        if overlap.start > self.start:
            pieces.append(Interval(self.start, overlap.start))
        if overlap.end < own_end:
            pieces.append(Interval(overlap.end, own_end))
        return pieces


def total_duration(intervals: List[Interval], reference: Optional[float] = None) -> float:
    """Sum of interval lengths, overlaps counted as many times as they occur."""
    return sum(interval.duration(reference) for interval in intervals)


def subtract_all(base: Interval, removed: List[Interval]) -> List[Interval]:
    """Remove every interval in ``removed`` from ``base`` and return what is left."""
    remaining = [base] if base.duration() > 0 else []
    for cut in removed:
        next_remaining: List[Interval] = []
        for piece in remaining:
            next_remaining.extend(piece.subtract(cut))
        remaining = next_remaining
    return remaining
