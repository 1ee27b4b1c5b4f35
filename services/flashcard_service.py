import logging
import threading
from typing import Callable, List, Optional

from config import Config, Messages
from errors import EmptyResultError, GenerationError, RequestInProgressError, ValidationError
from models import Flashcard, FlashcardSet, StatusEvent
from utils import join_terms, parse_flashcards

logger = logging.getLogger(__name__)

class FlashcardSession:
    """Flashcards generated for one topic during one page session.

    ``generate`` is any callable ``(prompt, model_id) -> text``. A renderer
    receives ``render(card, position)`` once per new card and ``clear()``
    when a fresh set replaces the old one; ``start`` and ``extend`` accept
    one per call, falling back to ``renderer``. ``on_status`` receives every
    ``StatusEvent``.
    """
    def __init__(self, generate: Callable[[str, str], str], renderer=None,
                 on_status: Optional[Callable[[StatusEvent], None]] = None,
                 model_id: Optional[str] = None, add_more_count: Optional[int] = None):
        self.generate = generate
        self.renderer = renderer
        self.on_status = on_status
        self.model_id = model_id or Config.MODEL_ID
        self.add_more_count = add_more_count or Config.ADD_MORE_COUNT
        self.topic: Optional[str] = None
        self.flashcards = FlashcardSet()
        self.status = StatusEvent(StatusEvent.SUCCESS)
        self._lock = threading.Lock()

    @property
    def in_progress(self) -> bool:
        return self._lock.locked()

    def start(self, topic: str, renderer=None) -> List[Flashcard]:
        """Generate a new set for ``topic``, replacing the current one"""
        if renderer is None:
            renderer = self.renderer
        topic = (topic or '').strip()
        if not topic:
            self._fail(ValidationError(Messages.TOPIC_REQUIRED))

        with self._operation(Messages.GENERATING):
            prompt = Config.FLASHCARD_GENERATION_PROMPT.format(topic=topic)
            text = self._request(prompt, Messages.EMPTY_RESPONSE, Messages.ERROR)

            flashcards = FlashcardSet(parse_flashcards(text))
            if not flashcards:
                raise EmptyResultError(Messages.NO_VALID_CARDS)

            self.topic = topic
            self.flashcards = flashcards
            if renderer is not None:
                renderer.clear()
                for index, card in enumerate(flashcards):
                    renderer.render(card, index)

        logger.info("Generated %d flashcards for topic %r", len(flashcards), topic)
        return list(flashcards)

    def extend(self, topic: Optional[str] = None, renderer=None) -> List[Flashcard]:
        """Ask for more cards on ``topic`` and append the ones with new terms"""
        if renderer is None:
            renderer = self.renderer
        topic = (topic or self.topic or '').strip()
        if not topic or not self.flashcards:
            self._fail(ValidationError(Messages.ADD_MORE_REQUIRED))

        with self._operation(Messages.GENERATING_MORE):
            prompt = Config.ADD_MORE_PROMPT.format(
                topic=topic,
                existing_terms=join_terms(self.flashcards.terms()),
                count=self.add_more_count
            )
            text = self._request(prompt, Messages.EMPTY_RESPONSE_MORE, Messages.ERROR_MORE)

            # Filter against a copy so a failure leaves the current set untouched
            merged = FlashcardSet(self.flashcards)
            new_cards = [card for card in parse_flashcards(text) if merged.add(card)]
            if not new_cards:
                raise EmptyResultError(Messages.NO_NEW_CARDS)

            start_index = len(self.flashcards)
            self.flashcards = merged
            if renderer is not None:
                for offset, card in enumerate(new_cards):
                    renderer.render(card, start_index + offset)

        logger.info("Added %d flashcards for topic %r (%d total)",
                    len(new_cards), topic, len(self.flashcards))
        return new_cards

    def _request(self, prompt: str, empty_message: str, error_template: str) -> str:
        try:
            text = self.generate(prompt, self.model_id)
        except Exception as e:
            logger.exception("Error generating content with %s", self.model_id)
            detail = str(e) or Messages.UNKNOWN_ERROR
            raise GenerationError(error_template.format(detail=detail)) from e

        if not text or not text.strip():
            raise GenerationError(empty_message)
        logger.debug("Raw response: %s", text)
        return text

    def _operation(self, progress_message: str):
        return _Operation(self, progress_message)

    def _set_status(self, event: StatusEvent):
        self.status = event
        if self.on_status is not None:
            self.on_status(event)

    def _fail(self, error):
        # The running operation owns the status line until it concludes
        if not self.in_progress:
            self._set_status(StatusEvent(StatusEvent.ERROR, error.message))
        raise error

class _Operation:
    """Holds the session lock for one generation request and reports its outcome"""
    def __init__(self, session: FlashcardSession, progress_message: str):
        self.session = session
        self.progress_message = progress_message

    def __enter__(self):
        if not self.session._lock.acquire(blocking=False):
            self.session._fail(RequestInProgressError(Messages.IN_PROGRESS))
        self.session._set_status(StatusEvent(StatusEvent.PROGRESS, self.progress_message))
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            if exc_type is None:
                self.session._set_status(StatusEvent(StatusEvent.SUCCESS))
            elif isinstance(exc, (EmptyResultError, GenerationError)):
                self.session._set_status(StatusEvent(StatusEvent.ERROR, exc.message))
            else:
                self.session._set_status(StatusEvent(StatusEvent.ERROR, Messages.UNKNOWN_ERROR))
        finally:
            self.session._lock.release()
        return False
