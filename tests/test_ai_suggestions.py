import json
import time

import httpx
import pytest

from config.settings import settings
from services.ai_service import AIService
from utils.errors import InvalidResponseError, UpstreamError

AI_URL = "https://ai.test/api/v1/chat/completions"

COMPLETION = {
    "id": "gen-1",
    "model": "mistralai/mistral-7b-instruct:free",
    "choices": [
        {
            "message": {
                "role": "assistant",
                "content": "Name: Shakshuka\nDescription: Eggs poached in tomato sauce\nIngredients:\n- 4 eggs\n- 1 can tomatoes\nRecipe Instructions:\n1. Simmer the sauce.\n2. Poach the eggs.",
            }
        }
    ],
}


def test_empty_prompt_is_400(client, use_ai):
    fake = use_ai(meals=COMPLETION)

    response = client.post("/api/ai-suggestions", json={"prompt": ""})

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt is required"}
    assert fake.calls == []


def test_missing_prompt_is_400(client, use_ai):
    use_ai(meals=COMPLETION)

    response = client.post("/api/ai-suggestions", json={})

    assert response.status_code == 400


def test_returns_raw_completion(client, use_ai):
    fake = use_ai(meals=COMPLETION)

    response = client.post("/api/ai-suggestions", json={"prompt": "quick vegetarian dinner"})

    assert response.status_code == 200
    assert response.json() == COMPLETION
    assert fake.calls == [("meals", "quick vegetarian dinner")]


def test_hanging_request_times_out_and_is_cancelled(client, use_ai, monkeypatch):
    monkeypatch.setattr(settings, "ai_request_timeout", 0.2)
    fake = use_ai(hang=True)

    started = time.monotonic()
    response = client.post("/api/ai-suggestions", json={"prompt": "dinner ideas"})
    elapsed = time.monotonic() - started

    assert response.status_code == 408
    assert response.json() == {"error": "Request took too long to complete. Please try again."}
    assert 0.2 <= elapsed < 5
    assert fake.cancelled


def test_upstream_failure_passes_status(client, use_ai):
    use_ai(error=UpstreamError("AI service failed", status_code=502))

    response = client.post("/api/ai-suggestions", json={"prompt": "lunch"})

    assert response.status_code == 502
    assert response.json() == {"error": "AI service failed"}


def test_unexpected_error_is_generic_500(client, use_ai):
    use_ai(error=RuntimeError("boom"))

    response = client.post("/api/ai-suggestions", json={"prompt": "lunch"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to get AI suggestions"}


def _service(handler):
    return AIService(api_url=AI_URL, api_key="test-key", transport=httpx.MockTransport(handler))


async def test_suggest_meals_sends_formatting_contract():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=COMPLETION)

    data = await _service(handler).suggest_meals("something with mushrooms")

    assert data == COMPLETION
    sent = json.loads(requests[0].content)
    assert sent["model"] == "mistralai/mistral-7b-instruct:free"
    assert sent["temperature"] == 0.7
    assert sent["max_tokens"] == 500
    system, user = sent["messages"]
    assert system["role"] == "system"
    for field in ("Name:", "Description:", "Ingredients:", "Recipe Instructions:"):
        assert field in system["content"]
    assert "exactly 3" in system["content"]
    assert "something with mushrooms" in user["content"]
    assert requests[0].headers["X-Title"] == settings.app_title


async def test_suggest_meals_error_status():
    def handler(request):
        return httpx.Response(401, json={"error": {"message": "No auth credentials found"}})

    with pytest.raises(UpstreamError) as exc_info:
        await _service(handler).suggest_meals("dinner")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "AI service failed"


@pytest.mark.parametrize("body", [
    {"choices": []},
    {"choices": [{"message": {"content": ""}}]},
    {"id": "gen-2"},
])
async def test_suggest_meals_requires_completion_content(body):
    def handler(request):
        return httpx.Response(200, json=body)

    with pytest.raises(InvalidResponseError):
        await _service(handler).suggest_meals("dinner")
