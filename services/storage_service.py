import logging
import threading
import time
import uuid

from config import Config
from services.flashcard_service import FlashcardSession

logger = logging.getLogger(__name__)

class SessionStore:
    """Keep one FlashcardSession per browser session, in memory only"""
    def __init__(self, generate, max_age=None):
        self.generate = generate
        self.max_age = max_age or Config.SESSION_MAX_AGE
        self._sessions = {}
        self._last_used = {}
        self._lock = threading.Lock()

    @staticmethod
    def new_key():
        """Generate a unique key for a browser session"""
        return uuid.uuid4().hex

    def get(self, key):
        """Get the session for a key, creating it if needed"""
        with self._lock:
            now = time.time()
            self._remove_stale(now, self.max_age)
            session = self._sessions.get(key)
            if session is None:
                session = FlashcardSession(
                    self.generate,
                    on_status=lambda event: logger.debug("Session %s status: %s", key, event)
                )
                self._sessions[key] = session
            self._last_used[key] = now
            return session

    def discard(self, key):
        """Forget a session, e.g. when its page is reloaded"""
        with self._lock:
            self._sessions.pop(key, None)
            self._last_used.pop(key, None)

    def cleanup_old_sessions(self, max_age=None):
        """Remove sessions idle for longer than max_age seconds"""
        with self._lock:
            return self._remove_stale(time.time(), max_age or self.max_age)

    def _remove_stale(self, now, max_age):
        # Caller holds self._lock; sessions with a running request are kept
        stale = [
            key for key, last_used in self._last_used.items()
            if now - last_used > max_age and not self._sessions[key].in_progress
        ]
        for key in stale:
            del self._sessions[key]
            del self._last_used[key]
        if stale:
            logger.info("Removed %d idle flashcard sessions", len(stale))
        return len(stale)

    def __len__(self):
        return len(self._sessions)
