from datetime import date

DATE_FMT = "%d/%m/%Y"

# Fixed English names; calendar.month_name follows the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(dt: date) -> str:
    """
    Format a date into 'DD/MM/YYYY' string.
    """
    return dt.strftime(DATE_FMT)


def month_name(month: int) -> str:
    """Full English name of a 1-based month number."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")
    return MONTH_NAMES[month - 1]
