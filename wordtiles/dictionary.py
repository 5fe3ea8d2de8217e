from __future__ import annotations
import asyncio
import logging
from typing import Any, Optional, Tuple
from urllib.parse import quote

import requests

from .config import settings

logger = logging.getLogger(__name__)

# English dictionary backed by dictionaryapi.dev.
# The API answers 404 for unknown words and a list of entries otherwise; each
# entry carries the headword under "word" plus meanings, phonetics, etc.


class DictionaryService:
    def __init__(self, url_template: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.url_template = url_template or settings.DICTIONARY_URL
        self.timeout = timeout if timeout is not None else settings.DICTIONARY_TIMEOUT_SECONDS
        self._session = session or requests.Session()

    def url_for(self, word: str) -> str:
        return self.url_template.format(word=quote(word.lower(), safe=''))

    def _fetch_entries(self, word: str) -> Optional[list]:
        """Blocking lookup. Returns the entry list, or None for any miss."""
        try:
            response = self._session.get(self.url_for(word), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Dictionary lookup for %r failed: %s", word, exc)
            return None
        if not response.ok:
            return None
        try:
            body: Any = response.json()
        except ValueError:
            logger.warning("Dictionary returned a non-JSON body for %r", word)
            return None
        if not isinstance(body, list) or not body:
            return None
        first = body[0]
        if not isinstance(first, dict):
            return None
        headword = first.get('word')
        if not isinstance(headword, str) or not headword:
            return None
        return body

    async def is_valid(self, word: str) -> bool:
        valid, _ = await self.lookup(word, with_definition=False)
        return valid

    async def definition(self, word: str) -> Optional[str]:
        _, text = await self.lookup(word)
        return text

    async def lookup(self, word: str, with_definition: bool = True) -> Tuple[bool, Optional[str]]:
        """One request answering both 'is it a word' and 'what does it mean'."""
        if not word:
            return False, None
        entries = await asyncio.to_thread(self._fetch_entries, word)
        if entries is None:
            return False, None
        return True, first_definition(entries) if with_definition else None


def first_definition(entries: list) -> Optional[str]:
    for entry in entries:
        meanings = entry.get('meanings') if isinstance(entry, dict) else None
        for meaning in meanings if isinstance(meanings, list) else []:
            definitions = meaning.get('definitions') if isinstance(meaning, dict) else None
            for d in definitions if isinstance(definitions, list) else []:
                text = d.get('definition') if isinstance(d, dict) else None
                if isinstance(text, str) and text:
                    return text
    return None


# Singleton instance
service = DictionaryService()
