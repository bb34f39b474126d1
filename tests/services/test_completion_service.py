import asyncio
import json
from unittest.mock import patch, call

import pytest
from requests import ConnectionError as RequestsConnectionError

from interview_coach.config import Settings
from interview_coach.models.evaluation import CompletionOutcome
from interview_coach.services.completion_service import CompletionError, CompletionService
from tests.helper import MockResponse, completion_payload

MESSAGES = [
    {"role": "system", "content": "theSystemPrompt"},
    {"role": "user", "content": "theUserPrompt"},
]


def test_to_dict(completion_service):
    result = completion_service.to_dict(MESSAGES)
    expected = {
        "model": "theModel",
        "messages": MESSAGES,
        "temperature": 0.7,
        "max_tokens": 2000,
        "stream": False,
    }
    assert result == expected


def test_from_settings():
    settings = Settings(
        completion_api_key="theKey",
        completion_api_url="theUrl",
        completion_model="theModel",
        completion_temperature=0.2,
        completion_max_tokens=123,
        completion_timeout=7,
        max_attempts=2,
        retry_base_delay=0.5,
    )
    tested = CompletionService.from_settings(settings)
    assert tested.api_key == "theKey"
    assert tested.api_url == "theUrl"
    assert tested.model == "theModel"
    assert tested.temperature == 0.2
    assert tested.max_tokens == 123
    assert tested.timeout == 7
    assert tested.retry_policy.max_attempts == 2
    assert tested.retry_policy.base_delay == 0.5


@patch("interview_coach.services.completion_service.requests_post")
def test_post(requests_post, completion_service):
    requests_post.side_effect = [MockResponse(200, completion_payload("theContent"))]

    result = completion_service.post(MESSAGES)
    assert result == "theContent"

    calls = [call(
        "https://completion.example/v1/chat/completions",
        headers={
            "Content-Type": "application/json",
            "Authorization": "Bearer theKey",
        },
        data=json.dumps(completion_service.to_dict(MESSAGES)),
        verify=True,
        timeout=30,
    )]
    assert requests_post.mock_calls == calls


@patch("interview_coach.services.completion_service.requests_post")
def test_post_failures(requests_post, completion_service):
    tests = [
        (MockResponse(500, text="Internal Server Error"), "Completion API error: 500"),
        (MockResponse(401, text="Unauthorized"), "Completion API error: 401"),
        (MockResponse(200, None, text="<html>"), "Malformed completion response"),
        (MockResponse(200, {"choices": []}), "Malformed completion response"),
        (MockResponse(200, {"result": "nope"}), "Malformed completion response"),
        (MockResponse(200, completion_payload("   ")), "Empty completion content"),
        (RequestsConnectionError("connection refused"), "Network error"),
        (UnicodeEncodeError("latin-1", "Bearer \u201ckey", 7, 8, "ordinal not in range(256)"), "Network error"),
    ]
    for side_effect, expected in tests:
        requests_post.reset_mock()
        requests_post.side_effect = [side_effect]
        with pytest.raises(CompletionError) as e:
            completion_service.post(MESSAGES)
        assert str(e.value).startswith(expected)


@patch("interview_coach.services.completion_service.requests_post")
def test_complete_first_attempt(requests_post, completion_service, recording_sleep):
    requests_post.side_effect = [MockResponse(200, completion_payload("Overall Score: 8/10"))]

    result = asyncio.run(completion_service.complete(MESSAGES))
    expected = CompletionOutcome(text="Overall Score: 8/10", attempts=1, exhausted=False)
    assert result == expected
    assert requests_post.call_count == 1
    assert recording_sleep.delays == []


@patch("interview_coach.services.completion_service.requests_post")
def test_complete_recovers_after_retries(requests_post, completion_service, recording_sleep):
    requests_post.side_effect = [
        MockResponse(503, text="busy"),
        RequestsConnectionError("reset"),
        MockResponse(200, completion_payload("theEvaluation")),
    ]

    result = asyncio.run(completion_service.complete(MESSAGES))
    assert result.text == "theEvaluation"
    assert result.attempts == 3
    assert result.exhausted is False
    assert recording_sleep.delays == [1.0, 2.0]


@patch("interview_coach.services.completion_service.requests_post")
def test_complete_exhausted(requests_post, completion_service, recording_sleep):
    requests_post.return_value = MockResponse(500, text="Internal Server Error")

    result = asyncio.run(completion_service.complete(MESSAGES))
    assert result.text is None
    assert result.exhausted is True
    assert result.attempts == 3
    assert result.last_error.startswith("Completion API error: 500")
    # never more than three attempts, sleeping 1s then 2s between them
    assert requests_post.call_count == 3
    assert recording_sleep.delays == [1.0, 2.0]


@patch("interview_coach.services.completion_service.requests_post")
def test_complete_can_be_cancelled_during_backoff(requests_post):
    requests_post.return_value = MockResponse(500, text="Internal Server Error")

    async def cancelled_sleep(seconds):
        raise asyncio.CancelledError()

    tested = CompletionService(api_key="k", api_url="theUrl", model="m", sleep=cancelled_sleep)
    with pytest.raises(asyncio.CancelledError):
        asyncio.run(tested.complete(MESSAGES))
    assert requests_post.call_count == 1


@patch("interview_coach.services.completion_service.requests_post")
def test_post_accepts_any_2xx(requests_post, completion_service):
    for status_code in [200, 201, 299]:
        requests_post.side_effect = [MockResponse(status_code, completion_payload("theContent"))]
        assert completion_service.post(MESSAGES) == "theContent", f"---> {status_code}"

    for status_code in [199, 300, 302]:
        requests_post.side_effect = [MockResponse(status_code, completion_payload("theContent"))]
        with pytest.raises(CompletionError):
            completion_service.post(MESSAGES)


@patch("interview_coach.services.completion_service.requests_post")
def test_complete_header_encoding_failure_is_exhausted(requests_post, completion_service, recording_sleep):
    requests_post.side_effect = UnicodeEncodeError("latin-1", "Bearer “key", 7, 8, "ordinal not in range(256)")

    result = asyncio.run(completion_service.complete(MESSAGES))
    assert result.exhausted is True
    assert result.attempts == 3
    assert result.last_error.startswith("Network error")
    assert recording_sleep.delays == [1.0, 2.0]
