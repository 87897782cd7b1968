"""games_submissions join table model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base
from models.constants import GAMES_SUBMISSIONS_TABLE, GAMES_TABLE, SUBMISSIONS_TABLE
from models.mixins import TimestampMixin

if TYPE_CHECKING:
    from models.game import Game
    from models.submission import Submission


class GameSubmission(TimestampMixin, Base):
    """Links one submission as a player in one game."""

    __tablename__ = GAMES_SUBMISSIONS_TABLE

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    submission_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SUBMISSIONS_TABLE}.id"),
        nullable=False,
        comment="The submission that is a player in the linked game.",
    )
    game_id: Mapped[int] = mapped_column(
        ForeignKey(f"{GAMES_TABLE}.id"),
        nullable=False,
        comment="The game that is/was played by the linked player.",
    )
    output_url: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Link to the output generated by the linked submission.",
    )

    submission: Mapped[Submission] = relationship(back_populates="game_submissions")
    game: Mapped[Game] = relationship(back_populates="game_submissions")
