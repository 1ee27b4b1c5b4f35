import logging

from google import genai
from google.genai import types

from config import Config

logger = logging.getLogger(__name__)

class GeminiTextGenerator:
    """Text generation backed by the Gemini API.

    Instances are callables taking ``(prompt, model_id)`` and returning the
    response text, so anything with the same signature can replace them.
    The client is created on first use so the app starts without a key.
    """
    def __init__(self, api_key=None, client=None, config=None):
        self.api_key = api_key or Config.GEMINI_API_KEY
        self.config = config or Config.FLASHCARD_CONFIG
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def __call__(self, prompt: str, model_id: str) -> str:
        logger.debug("Requesting %s with a %d character prompt", model_id, len(prompt))
        response = self.client.models.generate_content(
            model=model_id,
            contents=types.Part.from_text(text=prompt),
            config=self.config
        )
        return response.text or ''
