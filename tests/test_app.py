def test_home_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert b"Add 5 More" in response.data


def test_generate_returns_cards(client, generator):
    generator.queue("Hello: Hola\nGoodbye: Adiós\nnoise")

    response = client.post("/generate", json={"topic": "Spanish"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["replace"] is True
    assert data["count"] == 2
    assert data["flashcards"] == [
        {"term": "Hello", "definition": "Hola", "index": 0},
        {"term": "Goodbye", "definition": "Adiós", "index": 1},
    ]


def test_generate_without_topic(client, generator):
    response = client.post("/generate", json={"topic": ""})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Please enter a topic or some terms and definitions."}
    assert generator.calls == []


def test_add_more_returns_only_new_cards(client, generator):
    generator.queue("Hello: Hola", "hello: again\nThanks: Gracias")
    client.post("/generate", json={"topic": "Spanish"})

    response = client.post("/add-more", json={"topic": "Spanish"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["replace"] is False
    assert data["count"] == 2
    assert data["flashcards"] == [{"term": "Thanks", "definition": "Gracias", "index": 1}]


def test_add_more_without_cards(client, generator):
    response = client.post("/add-more", json={"topic": "Spanish"})

    assert response.status_code == 400
    assert generator.calls == []


def test_add_more_failure_keeps_cards(client, generator):
    generator.queue("Hello: Hola", RuntimeError("boom"))
    client.post("/generate", json={"topic": "Spanish"})

    response = client.post("/add-more", json={"topic": "Spanish"})

    assert response.status_code == 502
    assert response.get_json()["error"] == "An error occurred while adding more cards: boom"
    state = client.get("/flashcards").get_json()
    assert state["count"] == 1
    assert state["in_progress"] is False
    assert state["status"]["type"] == "error"


def test_empty_result_status_code(client, generator):
    generator.queue("nothing useful")

    response = client.post("/generate", json={"topic": "Spanish"})

    assert response.status_code == 422


def test_flashcards_state(client, generator):
    generator.queue("Hello: Hola")
    client.post("/generate", json={"topic": "Spanish"})

    data = client.get("/flashcards").get_json()

    assert data["topic"] == "Spanish"
    assert data["flashcards"] == [{"term": "Hello", "definition": "Hola", "index": 0}]
    assert data["status"] == {"type": "success", "content": ""}


def test_page_reload_starts_new_session(client, generator):
    generator.queue("Hello: Hola")
    client.post("/generate", json={"topic": "Spanish"})

    client.get("/")

    assert client.get("/flashcards").get_json()["count"] == 0


def test_second_request_while_generating_is_rejected(client, generator):
    rejected = {}

    def add_more_during_generate(prompt, model_id):
        response = client.post("/add-more", json={"topic": "Spanish"})
        rejected["status_code"] = response.status_code
        rejected["body"] = response.get_json()
        return "Thanks: Gracias\nPlease: Por favor"

    generator.queue("Hello: Hola", add_more_during_generate)
    client.post("/generate", json={"topic": "Spanish"})

    response = client.post("/generate", json={"topic": "Spanish"})

    assert rejected["status_code"] == 409
    assert rejected["body"] == {"error": "Flashcards are already being generated. Please wait."}
    assert len(generator.calls) == 2
    assert response.get_json() == {
        "flashcards": [
            {"term": "Thanks", "definition": "Gracias", "index": 0},
            {"term": "Please", "definition": "Por favor", "index": 1},
        ],
        "replace": True,
        "count": 2,
    }
    state = client.get("/flashcards").get_json()
    assert state["in_progress"] is False
    assert state["status"] == {"type": "success", "content": ""}
