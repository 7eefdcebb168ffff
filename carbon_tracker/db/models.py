# carbon_tracker/db/models.py
from sqlalchemy import Column, Integer, String, Float, Date, DateTime, JSON
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    location = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class Activity(Base):
    __tablename__ = "activities"
    id = Column(Integer, primary_key=True, index=True)
    category = Column(String, index=True, nullable=False)   # transport, energy, food, shopping, other
    type = Column(String, nullable=False)                   # car, electricity, vegetarian_day, ...
    quantity = Column(Float, nullable=False, default=0.0)   # km, kWh, kg, days or spend
    unit = Column(String, nullable=True)
    meta = Column(JSON, nullable=True)
    emission_kg = Column(Float, nullable=False)             # fixed at creation, never recomputed
    date = Column(Date, index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
