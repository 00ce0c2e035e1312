"""
Pydantic models for what a game session hands to the presentation layer.
- One model per guess (GuessEntryOut), one per submitted line (GuessOutcome)
- ScoreboardOut is a read-only snapshot of the session statistics
"""

from typing import Optional

from pydantic import BaseModel, Field

from .types import GameStatus, OutcomeKind


# 1. Feedback for a single recorded guess
class GuessEntryOut(BaseModel):
    guess: str = Field(..., description="The player's guess, e.g. '0123'")
    well_placed: int = Field(..., ge=0, le=4, description="Right symbol, right position")
    misplaced: int = Field(..., ge=0, le=4, description="Right symbol, wrong position")
    message: str = Field(..., description="Feedback message")
    timestamp: float = Field(..., description="When the guess was made")


# 2. Result of submitting one line of input
class GuessOutcome(BaseModel):
    outcome: OutcomeKind = Field(..., description="What happened to this submission")
    status: GameStatus = Field(..., description="Game state after the submission")
    attempts_left: int = Field(..., description="How many counted guesses remain")
    feedback: Optional[GuessEntryOut] = Field(None, description="Feedback for this guess, if recorded")
    secret: Optional[str] = Field(None, description="The secret code (only revealed if game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses allowed.')")


# 3. Scoreboard snapshot
class ScoreboardOut(BaseModel):
    games_started: int = Field(..., description="Games started in this process")
    games_won: int = Field(..., description="Games won in this process")
    games_lost: int = Field(..., description="Games lost in this process")

    current_streak: int = Field(..., description="Current consecutive wins")
    best_streak: int = Field(..., description="Best consecutive wins")

    average_guesses_to_win: Optional[float] = Field(
        None, description="Average number of guesses used in wins"
    )
    fastest_win_guesses: Optional[int] = Field(
        None, description="Fewest guesses taken to win a game"
    )
