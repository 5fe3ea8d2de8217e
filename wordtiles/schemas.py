from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional


class RejectReason(str, Enum):
    DUPLICATE = 'duplicate'
    INVALID_LETTERS = 'invalid_letters'
    NOT_RECOGNIZED = 'not_recognized'


ACCEPTED_MESSAGE = 'Nice!'

REJECT_MESSAGES = {
    RejectReason.DUPLICATE: 'Word already used!',
    RejectReason.INVALID_LETTERS: 'Word contains invalid letter(s)!',
    RejectReason.NOT_RECOGNIZED: 'Word not recognized!',
}


class FeedbackState(BaseModel):
    message: str = ''
    visible: bool = False


class GameStateView(BaseModel):
    gameId: str
    letters: List[str]
    currentInput: str = ''
    scoredWords: List[str] = []
    score: int = 0
    highScore: int = 0
    feedback: FeedbackState = Field(default_factory=FeedbackState)
    round: int = 1


class SubmitWord(BaseModel):
    word: Optional[str] = None


class InputUpdate(BaseModel):
    text: str = ''


class SubmitResult(BaseModel):
    word: str
    accepted: bool
    reason: Optional[RejectReason] = None
    message: Optional[str] = None
    # Completion arrived after the session moved on; nothing was applied
    stale: bool = False
    score: int = 0
    scoredWords: List[str] = []


class HighScoreView(BaseModel):
    highScore: int = Field(0, ge=0)


class WordLookup(BaseModel):
    word: str
    valid: bool
    definition: Optional[str] = None
