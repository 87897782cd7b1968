"""games table model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base
from models.constants import GAME_STATUSES, GAMES_TABLE, SUBMISSIONS_TABLE
from models.mixins import TimestampMixin

if TYPE_CHECKING:
    from models.game_submission import GameSubmission
    from models.submission import Submission


class Game(TimestampMixin, Base):
    """A game played between submissions; winner_id points at the winning one."""

    __tablename__ = GAMES_TABLE

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    status: Mapped[str | None] = mapped_column(
        Enum(
            *GAME_STATUSES,
            name="ck_games_status",
            native_enum=False,
            create_constraint=True,
        ),
        nullable=True,
    )
    win_reason: Mapped[str | None] = mapped_column(String(255), nullable=True)
    lose_reason: Mapped[str | None] = mapped_column(String(255), nullable=True)
    winner_id: Mapped[int | None] = mapped_column(
        ForeignKey(f"{SUBMISSIONS_TABLE}.id"),
        nullable=True,
        comment="The id of the winning submission",
    )
    log_url: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Link to the game log.",
    )

    winner: Mapped[Submission | None] = relationship(foreign_keys=[winner_id])
    game_submissions: Mapped[list[GameSubmission]] = relationship(back_populates="game")
