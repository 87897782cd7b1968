"""submissions table model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base
from models.constants import (
    GAMES_SUBMISSIONS_TABLE,
    SUBMISSION_STATUSES,
    SUBMISSIONS_TABLE,
    TEAMS_TABLE,
)
from models.mixins import TimestampMixin

if TYPE_CHECKING:
    from models.game import Game
    from models.game_submission import GameSubmission
    from models.team import Team


class Submission(TimestampMixin, Base):
    """One versioned code submission built for a team."""

    __tablename__ = SUBMISSIONS_TABLE
    __table_args__ = (
        UniqueConstraint("team_id", "version", name="uq_submissions_team_version"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    team_id: Mapped[int | None] = mapped_column(ForeignKey(f"{TEAMS_TABLE}.id"), nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        Enum(
            *SUBMISSION_STATUSES,
            name="ck_submissions_status",
            native_enum=False,
            create_constraint=True,
        ),
        nullable=False,
    )
    submission_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    log_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image_name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="The docker image of the submission contained on the Arena Docker Registry",
    )

    team: Mapped[Team | None] = relationship(back_populates="submissions")
    game_submissions: Mapped[list[GameSubmission]] = relationship(back_populates="submission")
    games: Mapped[list[Game]] = relationship(
        secondary=GAMES_SUBMISSIONS_TABLE,
        viewonly=True,
    )
