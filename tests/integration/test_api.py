"""Integration tests for storybuddy.api.main: FastAPI endpoints.

All tests use the FastAPI TestClient with a stubbed oracle and a fresh
ContentStore, so no network calls are made.
"""

import json

from storybuddy.api.main import BANNER
from storybuddy.core.exceptions import LLMError
from tests.conftest import make_quiz_payload


# ---------------------------------------------------------------------------
# Root and health.
# ---------------------------------------------------------------------------


class TestRoot:

    def test_banner(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "text/plain" in resp.headers["content-type"]
        assert resp.text == BANNER

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_store_stats(self, client, store):
        store.set_story("A story")
        resp = client.get("/health/store")
        assert resp.json()["has_story"] is True
        assert resp.json()["quiz_count"] == 0

    def test_cors_allows_any_origin(self, client):
        resp = client.get("/", headers={"Origin": "http://localhost:3000"})
        assert resp.headers["access-control-allow-origin"] == "*"


# ---------------------------------------------------------------------------
# POST /story
# ---------------------------------------------------------------------------


class TestStory:

    def test_markers_are_stripped(self, client, mock_llm):
        mock_llm.generate.return_value = "**Once** upon a time..."

        resp = client.post("/story", json={"age": 6, "topic": "a friendly dragon"})

        assert resp.status_code == 200
        assert resp.json() == {"story": "Once upon a time..."}

    def test_story_becomes_last_story(self, client, mock_llm, store):
        mock_llm.generate.return_value = "Ravi and the moon."

        client.post("/story", json={"age": 5, "topic": "the moon"})

        assert store.last_story == "Ravi and the moon."

    def test_upstream_error_message_is_returned(self, client, mock_llm):
        mock_llm.generate.side_effect = LLMError("API key not valid. Please pass a valid API key.")

        resp = client.post("/story", json={"age": 6, "topic": "rain"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "API key not valid. Please pass a valid API key."}

    def test_age_out_of_range(self, client, mock_llm):
        resp = client.post("/story", json={"age": 99, "topic": "rain"})

        assert resp.status_code == 400
        assert "age" in resp.json()["error"]
        mock_llm.generate.assert_not_awaited()

    def test_missing_topic(self, client):
        resp = client.post("/story", json={"age": 6})

        assert resp.status_code == 400
        assert "topic" in resp.json()["error"]


# ---------------------------------------------------------------------------
# POST /quiz
# ---------------------------------------------------------------------------


class TestQuiz:

    def test_correct_key_is_used(self, client, mock_llm):
        payload = make_quiz_payload()
        target = payload["questions"][2]
        del target["answer"]
        target["Correct"] = target["options"][3]
        mock_llm.generate.return_value = "```json\n" + json.dumps(payload) + "\n```"

        resp = client.post("/quiz", json={"story": "Meena and the kite."})

        assert resp.status_code == 200
        data = resp.json()
        assert data["quizId"]
        assert data["quizId"].isdigit()
        assert data["questions"][2]["answer"] == target["options"][3]
        assert data["questions"][2]["answerInferred"] is False

    def test_five_questions_four_options(self, client, mock_llm, quiz_json):
        mock_llm.generate.return_value = quiz_json

        data = client.post("/quiz", json={"story": "A story."}).json()

        assert len(data["questions"]) == 5
        assert all(len(q["options"]) == 4 for q in data["questions"])
        assert set(data["questions"][0]) == {"question", "options", "answer", "answerInferred"}

    def test_missing_answer_falls_back_to_first_option(self, client, mock_llm):
        mock_llm.generate.return_value = json.dumps(make_quiz_payload(answer_key=None))

        data = client.post("/quiz", json={"story": "A story."}).json()

        for q in data["questions"]:
            assert q["answer"] == q["options"][0]
            assert q["answerInferred"] is True

    def test_quiz_is_stored(self, client, mock_llm, store, quiz_json):
        mock_llm.generate.return_value = quiz_json

        quiz_id = client.post("/quiz", json={"story": "A story."}).json()["quizId"]

        assert store.get_quiz(quiz_id) is not None

    def test_quiz_ids_are_unique(self, client, mock_llm, quiz_json):
        mock_llm.generate.return_value = quiz_json

        ids = {client.post("/quiz", json={"story": "A story."}).json()["quizId"] for _ in range(5)}

        assert len(ids) == 5

    def test_defaults_to_last_story(self, client, mock_llm, quiz_json):
        mock_llm.generate.return_value = "Kavya learns to swim."
        client.post("/story", json={"age": 7, "topic": "swimming"})

        mock_llm.generate.return_value = quiz_json
        resp = client.post("/quiz", json={})

        assert resp.status_code == 200
        assert "Kavya learns to swim." in mock_llm.generate.await_args.args[0]

    def test_no_story_available(self, client):
        resp = client.post("/quiz", json={})

        assert resp.status_code == 400
        assert "story" in resp.json()["error"]

    def test_zero_answer_does_not_shadow_correct(self, client, mock_llm):
        mock_llm.generate.return_value = json.dumps({"questions": [
            {"question": "Which?", "options": ["a", "b"], "answer": 0, "Correct": "b"},
        ]})

        resp = client.post("/quiz", json={"story": "A story."})

        assert resp.status_code == 200
        assert resp.json()["questions"][0]["answer"] == "b"

    def test_null_option_returns_generic_error(self, client, mock_llm, store):
        mock_llm.generate.return_value = json.dumps({"questions": [
            {"question": "Which?", "options": [None, "b"], "answer": "b"},
        ]})

        resp = client.post("/quiz", json={"story": "A story."})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate quiz"}
        assert store.quiz_count == 0

    def test_malformed_json_returns_generic_error(self, client, mock_llm, store):
        mock_llm.generate.return_value = '{"questions": [ {"question": "Who?" '

        resp = client.post("/quiz", json={"story": "A story."})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate quiz"}
        assert store.quiz_count == 0


# ---------------------------------------------------------------------------
# POST /words and /translate
# ---------------------------------------------------------------------------


class TestWords:

    def test_returns_words(self, client, mock_llm):
        mock_llm.generate.return_value = "I wake up and brush my teeth. *Then* I eat dosa."

        resp = client.post("/words", json={"age": 7})

        assert resp.status_code == 200
        assert resp.json() == {"words": "I wake up and brush my teeth. Then I eat dosa."}


class TestTranslate:

    def test_returns_translation(self, client, mock_llm):
        mock_llm.generate.return_value = "శుభోదయం"

        resp = client.post("/translate", json={"text": "Good morning"})

        assert resp.status_code == 200
        assert resp.json() == {"translated": "శుభోదయం"}

    def test_upstream_failure(self, client, mock_llm):
        mock_llm.generate.side_effect = LLMError("Request rejected")

        resp = client.post("/translate", json={"text": "Good morning"})

        assert resp.status_code == 500
        assert "error" in resp.json()

    def test_empty_text(self, client):
        resp = client.post("/translate", json={"text": "  "})
        assert resp.status_code == 400


# ---------------------------------------------------------------------------
# POST /math
# ---------------------------------------------------------------------------


class TestMath:

    def test_returns_problems(self, client, mock_llm):
        mock_llm.generate.return_value = json.dumps([
            {"question": "5 + 3 =", "answer": 8},
            {"question": "10 + 2 =", "answer": 12},
        ])

        resp = client.post("/math", json={"age": 6, "operation": "addition"})

        assert resp.status_code == 200
        assert resp.json() == {"problems": [
            {"question": "5 + 3 =", "answer": 8},
            {"question": "10 + 2 =", "answer": 12},
        ]}

    def test_nan_answer_fails_whole_request(self, client, mock_llm):
        mock_llm.generate.return_value = '[{"question": "0 / 0 =", "answer": NaN}]'

        resp = client.post("/math", json={"age": 8, "operation": "division"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate problems"}

    def test_missing_answer_fails_whole_request(self, client, mock_llm):
        mock_llm.generate.return_value = json.dumps([
            {"question": "5 + 3 =", "answer": 8},
            {"question": "10 + 2 ="},
        ])

        resp = client.post("/math", json={"age": 6, "operation": "addition"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate problems"}

    def test_unknown_operation(self, client, mock_llm):
        resp = client.post("/math", json={"age": 6, "operation": "magic"})

        assert resp.status_code == 400
        assert "operation" in resp.json()["error"]
        mock_llm.generate.assert_not_awaited()

    def test_invalid_json_body(self, client):
        resp = client.post(
            "/math",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert "error" in resp.json()
