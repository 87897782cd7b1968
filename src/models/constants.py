"""Table names and enumerated status values for the schema."""

from __future__ import annotations

TEAMS_TABLE = "teams"
SUBMISSIONS_TABLE = "submissions"
GAMES_TABLE = "games"
GAMES_SUBMISSIONS_TABLE = "games_submissions"

SUBMISSION_STATUSES = ("queued", "building", "finished", "failed")
GAME_STATUSES = ("queued", "playing", "finished", "failed")
