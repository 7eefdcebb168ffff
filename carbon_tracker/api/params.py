from datetime import date, datetime
from typing import Optional

from fastapi import HTTPException

DATE_FORMAT = "%Y-%m-%d"


def parse_day(value: Optional[str], default: date, detail: str) -> date:
    """Parse YYYY-MM-DD; blank gives `default`, anything unparsable is a 400."""
    if value is None or not value.strip():
        return default
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise HTTPException(status_code=400, detail=detail)
