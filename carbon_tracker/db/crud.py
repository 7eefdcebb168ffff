# carbon_tracker/db/crud.py
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from carbon_tracker.db.models import Activity, User


def create_activity(db: Session, category: str, type: str, quantity: float, unit: str,
                    emission_kg: float, day: date, meta: dict = None) -> Activity:
    item = Activity(
        category=category,
        type=type,
        quantity=quantity,
        unit=unit,
        meta=meta or {},
        emission_kg=emission_kg,
        date=day
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def list_activities(db: Session, limit: Optional[int] = None) -> List[Activity]:
    q = db.query(Activity).order_by(Activity.date.asc(), Activity.id.asc())
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def activities_between(db: Session, start: date, end: date) -> List[Activity]:
    return (
        db.query(Activity)
        .filter(Activity.date >= start, Activity.date <= end)
        .order_by(Activity.date.asc(), Activity.id.asc())
        .all()
    )


def delete_activity(db: Session, activity_id: int) -> int:
    """Delete by id and return the number of rows removed (0 or 1)."""
    removed = db.query(Activity).filter(Activity.id == activity_id).delete()
    db.commit()
    return removed


def ensure_default_user(db: Session) -> Optional[User]:
    # no auth, a single demo user is enough
    if db.query(User).count() > 0:
        return None
    user = User(name="Demo User", location="Earth")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
