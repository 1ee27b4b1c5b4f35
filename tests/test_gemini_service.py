from config import Config
from services.gemini_service import GeminiTextGenerator


class FakeModels:
    def __init__(self, text):
        self.text = text
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})

        class Response:
            pass

        response = Response()
        response.text = self.text
        return response


class FakeClient:
    def __init__(self, text):
        self.models = FakeModels(text)


def test_generator_sends_prompt_to_model():
    client = FakeClient("Hello: Hola")
    generate = GeminiTextGenerator(client=client)

    assert generate("Spanish words", "gemini-test") == "Hello: Hola"

    call = client.models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["contents"].text == "Spanish words"
    assert call["config"] is Config.FLASHCARD_CONFIG


def test_generator_returns_empty_string_for_missing_text():
    generate = GeminiTextGenerator(client=FakeClient(None))

    assert generate("anything", "gemini-test") == ""
