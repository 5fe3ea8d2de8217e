from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .game_logic import uses_available_letters, was_already_used
from .schemas import REJECT_MESSAGES, RejectReason


@dataclass(frozen=True)
class Verdict:
    accepted: bool
    reason: Optional[RejectReason] = None

    @property
    def message(self) -> Optional[str]:
        return REJECT_MESSAGES.get(self.reason) if self.reason else None


ACCEPT = Verdict(accepted=True)


async def validate(word: str, letters: Sequence[str], history: Iterable[str], dictionary) -> Verdict:
    """Run the duplicate, letter and dictionary checks, stopping at the first failure.

    Only the dictionary check awaits; the first two never touch the network.
    """
    if was_already_used(word, history):
        return Verdict(False, RejectReason.DUPLICATE)
    if not uses_available_letters(word, letters):
        return Verdict(False, RejectReason.INVALID_LETTERS)
    if not await dictionary.is_valid(word):
        return Verdict(False, RejectReason.NOT_RECOGNIZED)
    return ACCEPT
