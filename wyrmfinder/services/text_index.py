"""
Full-text index over the catalog.

Every word of every indexed field is stored under all of its substrings,
so a query token matches anywhere inside a word ("mbe" finds "Ember").
Matching is case-insensitive. There is no relevance ranking; callers
order results themselves.

Query semantics:
- Within one field, a card matches when every query token matches.
- Results are unioned across fields.
"""

import logging
import re
import unicodedata
from collections import defaultdict
from collections.abc import Callable, Iterable

from wyrmfinder.models.card import Card
from wyrmfinder.services.catalog import CatalogStore

logger = logging.getLogger(__name__)

_WORD = re.compile(r"[^\W_]+")

# Field name -> text extractor
INDEXED_FIELDS: dict[str, Callable[[Card], str]] = {
    "name": lambda card: card.name,
    "ability": lambda card: card.ability,
    "number": lambda card: card.number,
}


def tokenize(text: str) -> list[str]:
    """Split text into case-folded word tokens."""
    if not text:
        return []
    return _WORD.findall(unicodedata.normalize("NFKC", text).casefold())


def _substrings(token: str) -> set[str]:
    return {token[i:j] for i in range(len(token)) for j in range(i + 1, len(token) + 1)}


class TextIndex:
    """
    Substring index keyed per field.

    Built once from a CatalogStore and read-only afterwards.
    """

    def __init__(
        self,
        cards: Iterable[Card],
        fields: dict[str, Callable[[Card], str]] | None = None,
    ) -> None:
        self._extractors = dict(fields if fields is not None else INDEXED_FIELDS)
        self._postings: dict[str, dict[str, set[str]]] = {
            name: defaultdict(set) for name in self._extractors
        }
        self._size = 0

        for card in cards:
            self._add(card)
            self._size += 1

        logger.info(
            "Indexed %d cards over fields %s (%d terms)",
            self._size,
            ", ".join(self._extractors),
            sum(len(postings) for postings in self._postings.values()),
        )

    @classmethod
    def from_catalog(cls, catalog: CatalogStore) -> "TextIndex":
        return cls(catalog.cards)

    def _add(self, card: Card) -> None:
        for name, extract in self._extractors.items():
            postings = self._postings[name]
            for token in tokenize(extract(card) or ""):
                for term in _substrings(token):
                    postings[term].add(card.id)

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._extractors)

    def __len__(self) -> int:
        return self._size

    def search(self, text: str) -> frozenset[str]:
        """
        Find identifiers of cards whose indexed text matches `text`.

        Empty text, or text with no word characters, matches nothing here.
        Treating empty text as "everything" is the caller's job.
        """
        tokens = tokenize(text)
        if not tokens:
            return frozenset()

        matches: set[str] = set()
        for postings in self._postings.values():
            field_matches: set[str] | None = None
            for token in tokens:
                ids = postings.get(token, set())
                field_matches = set(ids) if field_matches is None else field_matches & ids
                if not field_matches:
                    break
            if field_matches:
                matches |= field_matches

        return frozenset(matches)

