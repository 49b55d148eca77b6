"""ISO 8601 rendering of measurement timestamps."""
from datetime import datetime, timedelta
from typing import Optional


def print_temporal(value: Optional[datetime]) -> Optional[str]:
    """
    Render a timestamp as ISO 8601 text (calendar date and time).

    The offset is printed exactly as carried by the timestamp: naive values stay without offset, aware values keep
    their own offset (UTC is written as ``Z``). No conversion between zones takes place.

    Parameters
    ----------
    value : datetime, optional
        timestamp to render

    Returns
    -------
    str or None
        ISO 8601 string, None if no value is given
    """
    if value is None:
        return None
    text = value.isoformat()
    if value.utcoffset() == timedelta(0) and text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text
