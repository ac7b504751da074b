"""
Declarative base and shared model columns.
"""
from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class BaseModel(Base):
    """Abstract base model with an integer primary key."""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
