from __future__ import annotations
import os
from typing import List

from dotenv import load_dotenv

# Values in a local .env override nothing already set in the environment
load_dotenv()

DEFAULT_DICTIONARY_URL = 'https://api.dictionaryapi.dev/api/v2/entries/en/{word}'


class Settings:
    """Runtime settings, read from the environment with sensible defaults."""

    def __init__(self, **overrides):
        self.LETTERS_PER_GAME: int = int(os.getenv('LETTERS_PER_GAME', 5))
        self.FEEDBACK_DURATION_MS: int = int(os.getenv('FEEDBACK_DURATION_MS', 2000))
        self.DICTIONARY_URL: str = os.getenv('DICTIONARY_URL', DEFAULT_DICTIONARY_URL)
        self.DICTIONARY_TIMEOUT_SECONDS: float = float(os.getenv('DICTIONARY_TIMEOUT_SECONDS', 5))
        self.HIGH_SCORE_PATH: str = os.getenv('HIGH_SCORE_PATH', 'high_score.json')
        self.HIGH_SCORE_KEY: str = os.getenv('HIGH_SCORE_KEY', 'high score')
        self.LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.CORS_ORIGINS: List[str] = [
            o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()
        ]
        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)


settings = Settings()
