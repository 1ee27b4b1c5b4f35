from dataclasses import dataclass
from typing import Dict, Iterator, List, Set

@dataclass
class StatusEvent:
    """Status line update for the page"""
    type: str
    content: str = ''

    PROGRESS = 'progress'
    SUCCESS = 'success'
    ERROR = 'error'

    def to_dict(self) -> Dict[str, str]:
        return {'type': self.type, 'content': self.content}

@dataclass(frozen=True)
class Flashcard:
    """A term and its definition"""
    term: str
    definition: str

    @property
    def key(self) -> str:
        """Identity used for deduplication, the term without case"""
        return self.term.lower()

    def to_dict(self, index: int) -> Dict[str, object]:
        return {'term': self.term, 'definition': self.definition, 'index': index}

class FlashcardSet:
    """Ordered flashcards with case-insensitive deduplication by term"""
    def __init__(self, cards=None):
        self._cards: List[Flashcard] = []
        self._terms: Set[str] = set()
        for card in cards or []:
            self.add(card)

    def add(self, card: Flashcard) -> bool:
        """Append card if its term is new, return True if added"""
        if card.key in self._terms:
            return False
        self._terms.add(card.key)
        self._cards.append(card)
        return True

    def contains(self, term: str) -> bool:
        return term.lower() in self._terms

    def terms(self) -> List[str]:
        return [card.term for card in self._cards]

    def to_list(self) -> List[Dict[str, object]]:
        return [card.to_dict(index) for index, card in enumerate(self._cards)]

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Flashcard:
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FlashcardSet):
            return NotImplemented
        return self._cards == other._cards
