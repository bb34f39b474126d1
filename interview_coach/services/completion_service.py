import asyncio
import json
import logging
from http import HTTPStatus
from typing import Awaitable, Callable, Dict, List, Optional

from requests import RequestException, post as requests_post
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type

from interview_coach.config import Settings
from interview_coach.models.evaluation import CompletionOutcome
from interview_coach.services.retry_policy import RetryPolicy


class CompletionError(Exception):
    """Retryable failure of the completion endpoint"""


class CompletionService:
    """Client for an OpenAI compatible chat completion endpoint"""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        timeout: Optional[int] = 60,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionService":
        if not settings.completion_api_key:
            logging.warning("No completion API key configured, evaluations will use heuristic scoring")
        return cls(
            api_key=settings.completion_api_key,
            api_url=settings.completion_api_url,
            model=settings.completion_model,
            temperature=settings.completion_temperature,
            max_tokens=settings.completion_max_tokens,
            timeout=settings.completion_timeout,
            retry_policy=RetryPolicy(
                max_attempts=settings.max_attempts,
                base_delay=settings.retry_base_delay,
            ),
        )

    def to_dict(self, messages: List[Dict[str, str]]) -> dict:
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "stream": False,
        }

    def post(self, messages: List[Dict[str, str]]) -> str:
        """
        Single blocking request to the completion endpoint.
        Every failure mode is raised as CompletionError.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        try:
            response = requests_post(
                self.api_url,
                headers=headers,
                data=json.dumps(self.to_dict(messages)),
                verify=True,
                timeout=self.timeout,
            )
        except (RequestException, ValueError) as e:
            # ValueError covers headers http.client cannot encode, e.g. a non latin-1 API key
            raise CompletionError(f"Network error: {e}") from e

        if not HTTPStatus.OK.value <= response.status_code < HTTPStatus.MULTIPLE_CHOICES.value:
            raise CompletionError(f"Completion API error: {response.status_code} {response.text[:200]}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise CompletionError(f"Malformed completion response: {e}") from e

        if not isinstance(content, str) or not content.strip():
            raise CompletionError("Empty completion content")

        logging.info(f"Completion generated {len(content)} characters")
        return content

    def _log_retry(self, retry_state: RetryCallState) -> None:
        delay = retry_state.next_action.sleep if retry_state.next_action else 0
        logging.warning(
            f"Completion attempt {retry_state.attempt_number}/{self.retry_policy.max_attempts} failed "
            f"({retry_state.outcome.exception()}), retrying in {delay:.1f}s"
        )

    async def complete(self, messages: List[Dict[str, str]]) -> CompletionOutcome:
        """
        Run the request under the retry policy.

        Attempts are strictly sequential. When they are all used up the
        outcome is flagged exhausted instead of raising.
        """
        attempts = 0
        logging.info(
            f"Requesting completion: max_attempts={self.retry_policy.max_attempts}, "
            f"backoff={self.retry_policy.delays()}"
        )
        retrying = AsyncRetrying(
            stop=self.retry_policy.stop(),
            wait=self.retry_policy.wait,
            retry=retry_if_exception_type(CompletionError),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    text = await asyncio.to_thread(self.post, messages)
        except CompletionError as e:
            logging.error(f"Completion service unavailable after {attempts} attempts: {e}")
            return CompletionOutcome(attempts=attempts, exhausted=True, last_error=str(e))

        return CompletionOutcome(text=text, attempts=attempts)
