import logging
from functools import lru_cache
from typing import Optional

from interview_coach.config import Settings, get_settings
from interview_coach.models.evaluation import (
    EvaluationRequest,
    EvaluationResult,
    EvaluationSource,
    IdealResponse,
)
from interview_coach.models.framework import Framework
from interview_coach.prompts import ideal_response
from interview_coach.prompts.builder import build_messages, get_rubric
from interview_coach.services.completion_service import CompletionService
from interview_coach.services.framework_router import detect_framework
from interview_coach.services.heuristic_scorer import HeuristicScorer
from interview_coach.utils.feedback_parser import extract_overall_score


class EvaluationPipeline:
    """
    Response analysis pipeline: prompt, completion with retries, heuristic
    fallback, then score extraction.
    """

    def __init__(self, completion: CompletionService, scorer: Optional[HeuristicScorer] = None):
        self.completion = completion
        self.scorer = scorer or HeuristicScorer()

    @staticmethod
    def resolve_framework(transcript: str, framework: Optional[str]) -> Framework:
        if framework:
            return Framework.parse(framework)
        return detect_framework(transcript)

    async def evaluate(
        self,
        transcript: str,
        question_text: str,
        framework: Optional[str] = None,
    ) -> EvaluationResult:
        """
        Evaluate one candidate response.

        Never raises for completion failures: when every attempt fails the
        heuristic scorer's text is returned instead.
        """
        request = EvaluationRequest(
            transcript=transcript,
            question_text=question_text,
            framework=self.resolve_framework(transcript, framework),
        )
        logging.info(
            f"Starting evaluation: framework={request.framework.value}, transcript_len={len(transcript)}"
        )

        outcome = await self.completion.complete(build_messages(request))

        if outcome.exhausted:
            logging.warning(
                f"Falling back to heuristic scoring after {outcome.attempts} failed attempts"
            )
            text = self.scorer.evaluate(request).text
            source = EvaluationSource.HEURISTIC
        else:
            text = outcome.text
            source = EvaluationSource.COMPLETION

        overall_score = extract_overall_score(text)
        logging.info(f"Evaluation completed: source={source.value}, overall_score={overall_score}")

        return EvaluationResult(
            full_text=text,
            overall_score=overall_score,
            framework=request.framework,
            source=source,
        )

    async def generate_ideal_response(self, question_text: str, framework: Optional[str]) -> Optional[IdealResponse]:
        """Ask for a model answer and score it heuristically. None if the service is unavailable."""
        rubric = get_rubric(framework)
        messages = [
            {"role": "system", "content": ideal_response.get_system_instruction(rubric)},
            {"role": "user", "content": ideal_response.get_ideal_response_prompt(rubric, question_text)},
        ]

        outcome = await self.completion.complete(messages)
        if outcome.exhausted:
            logging.error("Ideal response generation failed: completion service unavailable")
            return None

        evaluation = self.scorer.evaluate(
            EvaluationRequest(
                transcript=outcome.text,
                question_text=question_text,
                framework=rubric.framework,
            )
        )
        return IdealResponse(
            framework=rubric.framework,
            question_text=question_text,
            response_text=outcome.text,
            evaluation=evaluation,
        )


def build_evaluation_pipeline(settings: Settings) -> EvaluationPipeline:
    return EvaluationPipeline(completion=CompletionService.from_settings(settings))


@lru_cache
def get_evaluation_pipeline() -> EvaluationPipeline:
    """FastAPI dependency; tests override it with a pipeline built on fakes."""
    return build_evaluation_pipeline(get_settings())
