from .feedback import FeedbackPresenter
from .game import GameSession, SessionManager

__all__ = ["FeedbackPresenter", "GameSession", "SessionManager"]
