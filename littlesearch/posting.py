"""
Occurrence and keyword index data structures.

An occurrence records how often a keyword appears in one document.
The keyword index maps each keyword to its occurrences, kept in
descending order of frequency.
"""

from dataclasses import dataclass, field
from typing import Iterator

from .tokenizer import get_keyword


@dataclass
class Occurrence:
    """
    Represents a keyword's occurrence in a document.
    - document: document identifier (name as listed in the document list)
    - frequency: number of times the keyword appears in the document
    """

    document: str
    frequency: int = 1

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: list[Occurrence] | None) -> list[int] | None:
    """
    Move the last occurrence of occs into its place by descending frequency.

    Elements 0..n-2 are already in order. The spot for element n-1 is found
    by binary search over that prefix; an equal frequency stops the search and
    the new occurrence goes in front of the one it matched.

    Returns the midpoint indexes probed, in order (empty for a one-element list).
    """
    if occs is None:
        return None
    probes: list[int] = []
    if len(occs) <= 1:
        return probes

    target = occs[-1].frequency
    low = 0
    high = len(occs) - 2
    while low <= high:
        mid = (low + high) // 2
        probes.append(mid)
        mid_freq = occs[mid].frequency
        if target < mid_freq:
            low = mid + 1
        elif target > mid_freq:
            high = mid - 1
        else:
            low = mid
            break

    occs.insert(low, occs.pop())
    return probes


@dataclass
class KeywordIndex:
    """
    Keyword index: map from keyword -> occurrences, plus the noise words
    excluded from it.
    """

    keywords_index: dict[str, list[Occurrence]] = field(default_factory=dict)
    noise_words: set[str] = field(default_factory=set)

    def get_keyword(self, word: str | None) -> str | None:
        """Normalize word against this index's noise words."""
        return get_keyword(word, self.noise_words)

    def merge_keywords(self, kws: dict[str, Occurrence] | None) -> None:
        """
        Merge one document's keyword table into the index, keeping each
        occurrence list in descending order of frequency.
        """
        if kws is None:
            return
        for keyword, occurrence in kws.items():
            occs = self.keywords_index.get(keyword)
            if occs is None:
                self.keywords_index[keyword] = [occurrence]
            else:
                occs.append(occurrence)
                insert_last_occurrence(occs)

    def get_occurrences(self, keyword: str) -> list[Occurrence]:
        """Return the occurrence list for a keyword, or empty list."""
        return self.keywords_index.get(keyword, [])

    def keywords(self) -> Iterator[str]:
        return iter(self.keywords_index)

    def documents(self) -> list[str]:
        """Distinct documents seen in the index, in the order first met."""
        seen: dict[str, None] = {}
        for occs in self.keywords_index.values():
            for occ in occs:
                seen.setdefault(occ.document, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self.keywords_index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self.keywords_index

    def to_dict(self) -> dict:
        """Plain {keyword: [[document, frequency], ...]} view for printing."""
        return {
            keyword: [[occ.document, occ.frequency] for occ in occs]
            for keyword, occs in self.keywords_index.items()
        }
