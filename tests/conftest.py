import pytest

from app import create_app
from services.flashcard_service import FlashcardSession
from services.render_service import CardPayloadRenderer


class StubGenerator:
    """Stands in for the Gemini call: replays queued responses and records prompts."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def __call__(self, prompt, model_id):
        self.calls.append((prompt, model_id))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(prompt, model_id)
        return response


class RecordingRenderer(CardPayloadRenderer):
    def __init__(self):
        super().__init__()
        self.rendered = []
        self.clears = 0

    def clear(self):
        super().clear()
        self.clears += 1

    def render(self, card, position):
        super().render(card, position)
        self.rendered.append((card.term, position))


@pytest.fixture
def generator():
    return StubGenerator()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def statuses():
    return []


@pytest.fixture
def flashcard_session(generator, renderer, statuses):
    return FlashcardSession(generator, renderer=renderer, on_status=statuses.append, model_id="test-model")


@pytest.fixture
def client(generator):
    app = create_app(generate=generator, secret_key="test")
    app.config["TESTING"] = True
    return app.test_client()
