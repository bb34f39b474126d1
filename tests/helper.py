from interview_coach.models.evaluation import CompletionOutcome

CIRCLES_TRANSCRIPT = (
    "Comprehend: We have a messaging app losing users. Identify: Teenagers. "
    "Report: They want speed. Cut: Speed first. List: Voice notes. "
    "Evaluate: High impact, high cost. Summarize: Ship voice notes."
)


class RecordingSleep:
    """Async sleep replacement that records requested delays"""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(float(seconds))


class FakeCompletion:
    """Stands in for CompletionService, returning queued outcomes"""

    def __init__(self, *outcomes: CompletionOutcome):
        self.outcomes = list(outcomes)
        self.calls = []

    async def complete(self, messages):
        self.calls.append(messages)
        return self.outcomes.pop(0)


class MockResponse:
    def __init__(self, status_code: int, payload=None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def completion_payload(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}
