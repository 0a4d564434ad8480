"""
Time formatting helpers for the Temps De Jeu statistics engine.

Every formatter accepts seconds (int or float) and clamps negative input to
zero, so a slightly-off reading never produces a negative clock.
"""
import math


def fmt_mmss(seconds: float) -> str:
    """
    Format seconds as MM:SS string.

    Args:
        seconds: Number of seconds to format

    Returns:
        Formatted time string in MM:SS format

    Example:
        >>> fmt_mmss(90)
        '01:30'
        >>> fmt_mmss(3661)
        '61:01'
    """
    total = int(max(0, seconds))
    m = total // 60
    s = total % 60
    return f"{m:02d}:{s:02d}"


def fmt_short(seconds: float) -> str:
    """
    Compact duration used in tables.

    Example:
        >>> fmt_short(150)
        "2'30"
        >>> fmt_short(45)
        '45s'
    """
    total = int(max(0, seconds))
    m, s = divmod(total, 60)
    if m > 0:
        return f"{m}'{s:02d}"
    return f"{s}s"


def fmt_match_minute(seconds: float, regulation: float) -> str:
    """
    Match minute as shown on a scoreboard, with added time after regulation.

    Args:
        seconds: Elapsed seconds in the period
        regulation: Regulation length of the period in seconds

    Example:
        >>> fmt_match_minute(2890, 2700)
        "45+3'"
    """
    minutes = int(max(0, seconds) // 60)
    if seconds > regulation:
        reg_minutes = int(regulation // 60)
        return f"{reg_minutes}+{minutes - reg_minutes}'"
    return f"{minutes}'"


def ceil_minutes(seconds: float) -> int:
    """Whole minutes needed to cover ``seconds``, rounded up."""
    if seconds <= 0:
        return 0
    return int(math.ceil(seconds / 60))
