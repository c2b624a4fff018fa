# core/formatters.py

# all pure utilities & date/datetime helpers
# must never import from models!

import datetime

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_percent(percent: int) -> str:
    return f"{percent}%"


def format_completion_bar(percent: int, width: int = 20) -> str:
    percent = max(0, min(100, percent))
    filled = (percent * width + 50) // 100

    return f"[{'#' * filled}{'-' * (width - filled)}]"


# === date formatters ===


def coerce_date(value: datetime.date | str | None) -> datetime.date:
    """
    Normalizes a reference date supplied by the caller.

    Args:
        value: A `datetime.date`, a `datetime.datetime` (its date part is used), an ISO `YYYY-MM-DD` string, or None for today.

    Returns:
        datetime.date: The normalized date.

    Raises:
        ValueError: If a string is not a valid ISO date.
        TypeError: If the value is not a date, a string, or None.
    """
    if value is None:
        return datetime.date.today()

    if isinstance(value, datetime.datetime):
        return value.date()

    if isinstance(value, datetime.date):
        return value

    if not isinstance(value, str):
        raise TypeError(f"Unsupported date value: {value!r}.")

    try:
        return datetime.date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Invalid date: '{value}'. Expected format YYYY-MM-DD.")


def format_date_iso(class_date: datetime.date) -> str:
    return class_date.isoformat()


def format_class_date_short(class_date: datetime.date) -> str:
    return f"{class_date.strftime('%b %d, %Y')}"


def format_day_name(class_date: datetime.date) -> str:
    return class_date.strftime("%A")
