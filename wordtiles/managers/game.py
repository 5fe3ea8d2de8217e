from __future__ import annotations
import logging
import random
from typing import Dict, List, Optional

from ..config import Settings, settings as default_settings
from ..game_logic import generate_letters, normalize_word
from ..schemas import ACCEPTED_MESSAGE, FeedbackState, GameStateView, SubmitResult
from ..store import HighScoreStore
from ..validator import validate
from .feedback import FeedbackPresenter

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, game_id: str, sio, dictionary, high_scores: HighScoreStore,
                 settings: Optional[Settings] = None, rng=random):
        self.id = game_id
        self.sio = sio
        self.dictionary = dictionary
        self.high_scores = high_scores
        self.settings = settings or default_settings
        self.rng = rng
        self.feedback = FeedbackPresenter(self.settings.FEEDBACK_DURATION_MS, on_change=self._emit_feedback)
        self.round: int = 0
        self.letters: List[str] = []
        self.scored_words: List[str] = []
        self.current_input: str = ''
        # latest lookup sequence number per normalized word
        self._lookup_seq: int = 0
        self._latest_lookup: Dict[str, int] = {}
        self._deal()

    @property
    def score(self) -> int:
        return len(self.scored_words)

    def _deal(self):
        self.round += 1
        self.letters = generate_letters(self.settings.LETTERS_PER_GAME, self.rng)
        self.scored_words = []
        self.current_input = ''
        self._latest_lookup.clear()

    def to_state(self) -> GameStateView:
        return GameStateView(
            gameId=self.id,
            letters=list(self.letters),
            currentInput=self.current_input,
            scoredWords=list(self.scored_words),
            score=self.score,
            highScore=self.high_scores.get(),
            feedback=self.feedback.snapshot(),
            round=self.round,
        )

    async def emit_state(self):
        await self.sio.emit('game:state', self.to_state().model_dump(mode='json'), room=self.id)

    async def _emit_feedback(self, state: FeedbackState):
        await self.sio.emit('feedback', state.model_dump(mode='json'), room=self.id)

    def update_input(self, text: str):
        self.current_input = text or ''

    async def submit(self, word: Optional[str] = None) -> SubmitResult:
        word = self.current_input if word is None else word
        normalized = normalize_word(word)
        issued_round = self.round
        self._lookup_seq += 1
        seq = self._lookup_seq
        self._latest_lookup[normalized] = seq

        verdict = await validate(word, self.letters, self.scored_words, self.dictionary)

        if issued_round != self.round or self._latest_lookup.get(normalized) != seq:
            logger.debug("Discarding stale lookup for %r in game %s", normalized, self.id)
            return self._result(normalized, accepted=False, stale=True)
        self._latest_lookup.pop(normalized, None)

        if not verdict.accepted:
            logger.debug("Rejected %r in game %s: %s", normalized, self.id, verdict.reason.value)
            await self.feedback.show(verdict.message)
            return self._result(normalized, accepted=False, reason=verdict.reason, message=verdict.message)

        self.scored_words.append(normalized)
        if normalize_word(self.current_input) == normalized:
            self.current_input = ''
        logger.info("Game %s scored %r (score %d)", self.id, normalized, self.score)
        await self.feedback.show(ACCEPTED_MESSAGE)
        await self.emit_state()
        return self._result(normalized, accepted=True, message=ACCEPTED_MESSAGE)

    def _result(self, word: str, **kwargs) -> SubmitResult:
        return SubmitResult(word=word, score=self.score, scoredWords=list(self.scored_words), **kwargs)

    async def end_session(self) -> GameStateView:
        final_score = self.score
        best = self.high_scores.get()
        if final_score > best:
            self.high_scores.set(final_score)
            logger.info("New high score %d (was %d) from game %s", final_score, best, self.id)
        self.feedback.clear()
        self._deal()
        await self.emit_state()
        return self.to_state()


class SessionManager:
    def __init__(self, sio, dictionary, high_scores: HighScoreStore,
                 settings: Optional[Settings] = None, rng=random):
        self.sio = sio
        self.dictionary = dictionary
        self.high_scores = high_scores
        self.settings = settings or default_settings
        self.rng = rng
        self.sessions: Dict[str, GameSession] = {}

    def get_or_create(self, game_id: str) -> GameSession:
        if game_id not in self.sessions:
            self.sessions[game_id] = GameSession(
                game_id, self.sio, self.dictionary, self.high_scores, self.settings, self.rng,
            )
        return self.sessions[game_id]

    def get_state(self, game_id: str) -> GameStateView:
        return self.get_or_create(game_id).to_state()

    def update_input(self, game_id: str, text: str) -> GameStateView:
        session = self.get_or_create(game_id)
        session.update_input(text)
        return session.to_state()

    async def submit(self, game_id: str, word: Optional[str] = None) -> SubmitResult:
        return await self.get_or_create(game_id).submit(word)

    async def end_session(self, game_id: str) -> GameStateView:
        return await self.get_or_create(game_id).end_session()

    def high_score(self) -> int:
        return self.high_scores.get()
