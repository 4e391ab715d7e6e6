"""Date formatting utilities for entry headers and document metadata."""

from datetime import datetime

PRESENT_LABEL = "Present"
DATE_RANGE_SEPARATOR = " – "

# Accepted input formats, most specific first
_DATE_FORMATS = [
    ("%Y-%m-%d", "%b %Y"),
    ("%Y-%m", "%b %Y"),
    ("%Y/%m", "%b %Y"),
    ("%Y", "%Y"),
]


def format_date(date_str: str) -> str:
    """
    Format an ISO-like date string as it appears on a resume.

    Empty dates mean the entry is ongoing and render as "Present". Strings
    that cannot be parsed are returned unchanged.

    Args:
        date_str: Date in YYYY-MM-DD, YYYY-MM or YYYY form (or free text)

    Returns:
        Display string such as "Mar 2021", "2019" or "Present"

    Examples:
        format_date("2021-03-15")   # "Mar 2021"
        format_date("")             # "Present"
        format_date("Summer 2020")  # "Summer 2020"
    """
    if not date_str or not str(date_str).strip():
        return PRESENT_LABEL

    text = str(date_str).strip()
    if text.lower() == "present":
        return PRESENT_LABEL

    for input_format, output_format in _DATE_FORMATS:
        try:
            return datetime.strptime(text, input_format).strftime(output_format)
        except ValueError:
            continue

    # Fall back to ISO timestamps ("2021-03-15T00:00:00")
    try:
        return datetime.fromisoformat(text).strftime("%b %Y")
    except ValueError:
        return text


def format_event_date(date_str: str) -> str:
    """
    Format the date of a one-off event (award, certificate, publication).

    Unlike range ends, a blank date stays blank instead of reading "Present".
    """
    if not date_str or not str(date_str).strip():
        return ""
    return format_date(date_str)


def format_date_range(start_date: str, end_date: str) -> str:
    """
    Format a start/end pair as "Mar 2021 – Present".

    A missing start date collapses the range to the end date alone, and a
    missing pair yields an empty string so headers can omit the date slot.
    """
    if not start_date and not end_date:
        return ""
    if not start_date:
        return format_date(end_date)
    return f"{format_date(start_date)}{DATE_RANGE_SEPARATOR}{format_date(end_date)}"


def format_timestamp(iso_timestamp: str) -> str:
    """
    Format ISO 8601 timestamp to readable format.

    Args:
        iso_timestamp: ISO 8601 formatted timestamp string

    Returns:
        Human-readable timestamp (e.g., "2025-11-13 18:45:40"), or the
        original string if parsing fails
    """
    try:
        dt = datetime.fromisoformat(iso_timestamp)
        return dt.strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, TypeError):
        return iso_timestamp
