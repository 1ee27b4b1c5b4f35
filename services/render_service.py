from typing import Dict, List

from models import Flashcard

class CardPayloadRenderer:
    """Collect the cards one request renders into its JSON response"""
    def __init__(self):
        self.cards: List[Dict[str, object]] = []
        self.replace = False

    def clear(self):
        self.cards = []
        self.replace = True

    def render(self, card: Flashcard, position: int):
        self.cards.append(card.to_dict(position))

    def drain(self) -> Dict[str, object]:
        """Return the cards rendered since the last drain and reset"""
        # Positions are contiguous, so the last one gives the size of the set
        count = self.cards[-1]['index'] + 1 if self.cards else 0
        payload = {'flashcards': self.cards, 'replace': self.replace, 'count': count}
        self.cards = []
        self.replace = False
        return payload
