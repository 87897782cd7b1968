"""ORM models."""

from models.base import Base
from models.constants import (
    GAME_STATUSES,
    GAMES_SUBMISSIONS_TABLE,
    GAMES_TABLE,
    SUBMISSION_STATUSES,
    SUBMISSIONS_TABLE,
    TEAMS_TABLE,
)
from models.game import Game
from models.game_submission import GameSubmission
from models.submission import Submission
from models.team import Team

__all__ = [
    "Base",
    "GAME_STATUSES",
    "GAMES_SUBMISSIONS_TABLE",
    "GAMES_TABLE",
    "Game",
    "GameSubmission",
    "SUBMISSION_STATUSES",
    "SUBMISSIONS_TABLE",
    "Submission",
    "TEAMS_TABLE",
    "Team",
]
