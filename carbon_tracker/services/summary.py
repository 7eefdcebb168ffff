from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Tuple

from carbon_tracker.services.emissions import round2


@dataclass
class DailyPoint:
    date: date
    kg: float


@dataclass
class Summary:
    start: date
    end: date
    total_kg: float = 0.0
    by_category: Dict[str, float] = field(default_factory=dict)
    by_day: List[DailyPoint] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.start.isoformat(),
            "to": self.end.isoformat(),
            "total_kg": self.total_kg,
            "by_category": dict(self.by_category),
            "by_day": [{"date": p.date.isoformat(), "kg": p.kg} for p in self.by_day],
        }


def _day(value) -> date:
    # datetime is a subclass of date, strip the time part before comparing
    if isinstance(value, datetime):
        return value.date()
    return value


def default_window(today: date, days: int = 30) -> Tuple[date, date]:
    """Trailing window of `days` calendar days ending today."""
    return today - timedelta(days=days - 1), today


def summarize(records: Iterable[Any], start: date, end: date) -> Summary:
    """
    Aggregate stored activities over the inclusive window [start, end].

    Records only need `category`, `date` and `emission_kg`. Records outside
    the window are skipped; input order does not matter.
    """
    start, end = _day(start), _day(end)

    total = 0.0
    by_cat: Dict[str, float] = {}
    by_day: Dict[date, float] = {}

    for r in records:
        d = _day(r.date)
        if d is None or d < start or d > end:
            continue
        kg = float(r.emission_kg or 0.0)
        total += kg
        by_cat[r.category] = by_cat.get(r.category, 0.0) + kg
        by_day[d] = by_day.get(d, 0.0) + kg

    # dense series, zero for days without activity
    # counted rather than stepped past `end`, which may be date.max
    points = []
    for i in range((end - start).days + 1):
        d = start + timedelta(days=i)
        points.append(DailyPoint(date=d, kg=round2(by_day.get(d, 0.0))))

    return Summary(
        start=start,
        end=end,
        total_kg=round2(total),
        by_category={k: round2(v) for k, v in by_cat.items()},
        by_day=points,
    )
