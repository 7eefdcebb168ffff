import logging
from datetime import date, datetime
from typing import Optional, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from carbon_tracker.api.params import parse_day
from carbon_tracker.db import crud
from carbon_tracker.db.session import get_db
from carbon_tracker.services.emissions import EmissionCalculator, get_calculator

logger = logging.getLogger(__name__)

router = APIRouter()

# --------------------------------------------------
# Request / Response Schemas
# --------------------------------------------------


class ActivityIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    category: str = Field(..., min_length=1, description="transport | energy | food | shopping | other")
    type: str = Field(..., min_length=1, description="car, electricity, vegetarian_day, ...")
    quantity: Optional[float] = None
    unit: Optional[str] = None
    meta: Optional[dict] = None
    date: Optional[str] = Field(default=None, description="YYYY-MM-DD, defaults to today")


class ActivityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: str
    type: str
    quantity: float
    unit: Optional[str]
    meta: Optional[dict]
    emission_kg: float
    date: date
    created_at: datetime

# --------------------------------------------------
# List Activities
# --------------------------------------------------


@router.get("", response_model=List[ActivityOut])
def list_activities(db: Session = Depends(get_db)):
    return crud.list_activities(db)

# --------------------------------------------------
# Create Activity
# --------------------------------------------------


@router.post("", response_model=ActivityOut)
def create_activity(
    payload: ActivityIn,
    db: Session = Depends(get_db),
    calculator: EmissionCalculator = Depends(get_calculator),
):
    """
    Store an activity with its CO2e computed once, at write time.
    """
    day = parse_day(payload.date, date.today(), "invalid date, use YYYY-MM-DD")
    unit = payload.unit or ""
    quantity = payload.quantity or 0.0

    emission = calculator.compute(payload.category, payload.type, quantity, unit)

    item = crud.create_activity(
        db,
        category=payload.category.lower(),
        type=payload.type,
        quantity=quantity,
        unit=unit,
        emission_kg=emission,
        day=day,
        meta=payload.meta,
    )
    logger.info("Stored activity %s (%s/%s) %.2f kg CO2e", item.id, item.category, item.type, emission)
    return item

# --------------------------------------------------
# Delete Activity
# --------------------------------------------------


@router.delete("/{activity_id}")
def delete_activity(activity_id: int, db: Session = Depends(get_db)):
    removed = crud.delete_activity(db, activity_id)
    if removed:
        logger.info("Deleted activity %s", activity_id)
    else:
        logger.info("Delete requested for missing activity %s", activity_id)
    return {"deleted": activity_id}
