"""teams table model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base
from models.constants import TEAMS_TABLE
from models.mixins import TimestampMixin

if TYPE_CHECKING:
    from models.submission import Submission


class Team(TimestampMixin, Base):
    """A registered team; parent of its code submissions."""

    __tablename__ = TEAMS_TABLE

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    contact_email: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(256), nullable=False)
    is_eligible: Mapped[bool] = mapped_column(Boolean, nullable=False)

    submissions: Mapped[list[Submission]] = relationship(back_populates="team")
