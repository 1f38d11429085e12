"""
SQLAlchemy models for contract records.
Used by the SQLAlchemy-backed repository when DATABASE_URL is set.
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Contract(Base):
    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    # Stored as naive UTC; aware values are normalised in the DTO layer
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"Contract(id={self.id!r}, name={self.name!r}, start_date={self.start_date!r}, end_date={self.end_date!r})"
