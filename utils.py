from typing import List, Optional

from models import Flashcard

def clean_flashcard_line(line: str) -> Optional[Flashcard]:
    """Turn a single 'Term: Definition' line into a Flashcard"""
    if not line or ':' not in line:
        return None
    # Only the first colon separates the term; the rest belongs to the definition
    term, definition = line.split(':', 1)
    term = term.strip()
    definition = definition.strip()

    if not term or not definition:
        return None

    return Flashcard(term=term, definition=definition)

def parse_flashcards(raw_text: str) -> List[Flashcard]:
    """Parse model output into flashcards, one per line, dropping malformed lines"""
    flashcards = []
    for line in (raw_text or '').split('\n'):
        card = clean_flashcard_line(line)
        if card:
            flashcards.append(card)
    return flashcards

def join_terms(terms: List[str]) -> str:
    return ', '.join(terms)
