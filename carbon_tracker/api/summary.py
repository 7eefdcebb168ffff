# carbon_tracker/api/summary.py
from datetime import date
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from carbon_tracker.api.params import parse_day
from carbon_tracker.db import crud
from carbon_tracker.db.session import get_db
from carbon_tracker.services.summary import default_window, summarize
from carbon_tracker.settings import settings

router = APIRouter()


@router.get("")
def summary(
    from_: Optional[str] = Query(None, alias="from", description="YYYY-MM-DD"),
    to: Optional[str] = Query(None, description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    default_from, default_to = default_window(date.today(), settings.summary_window_days)
    start = parse_day(from_, default_from, "invalid from")
    end = parse_day(to, default_to, "invalid to")

    rows = crud.activities_between(db, start, end)
    return summarize(rows, start, end).to_dict()
