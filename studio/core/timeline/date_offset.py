"""
Date offset resolution.

Maps a session date and a template offset to a concrete calendar date.

Dependencies: datetime (stdlib)
System role: Due date arithmetic for timeline tasks
"""

from datetime import date, timedelta


def resolve(session_date: date, offset_days: int) -> date:
    """
    Resolve a task offset against a session date.

    Calendar-day arithmetic (not business days); month and year rollover is
    handled by timedelta.

    Args:
        session_date: Date of the photo session
        offset_days: Days relative to the session (negative = before)

    Returns:
        date: Calculated due date

    Usage:
        resolve(date(2024, 6, 15), -30)  # date(2024, 5, 16)
    """
    return session_date + timedelta(days=offset_days)
