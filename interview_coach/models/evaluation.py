from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from interview_coach.models.framework import Framework


class EvaluationSource(str, Enum):
    """
    Which engine produced the evaluation text
    """
    COMPLETION = "completion"
    HEURISTIC = "heuristic"


class EvaluationRequest(BaseModel):
    """A single candidate submission to evaluate"""
    transcript: str = ""
    question_text: str = ""
    framework: Framework = Framework.GENERIC


class SectionScore(BaseModel):
    section_key: str
    title: str
    score: float = Field(ge=0, le=10)


class HeuristicEvaluation(BaseModel):
    """Output of the heuristic scorer: rendered text plus the scores behind it"""
    framework: Framework
    sections: List[SectionScore]
    overall_score: float = Field(ge=0, le=10)
    text: str


class EvaluationResult(BaseModel):
    """
    Final evaluation handed back to the caller.

    overall_score is always extracted from full_text, never computed on its own.
    """
    full_text: str
    overall_score: float
    framework: Framework
    source: EvaluationSource


class CompletionOutcome(BaseModel):
    """Result of a bounded completion attempt sequence"""
    text: Optional[str] = None
    attempts: int = 0
    exhausted: bool = False
    last_error: Optional[str] = None


class FeedbackComponent(BaseModel):
    title: str
    score: float
    observed: str = ""
    missing: str = ""
    suggestions: str = ""


class FeedbackBreakdown(BaseModel):
    """Structured view of an evaluation text, for display"""
    overall_score: float
    components: List[FeedbackComponent] = Field(default_factory=list)
    key_strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)


class IdealResponse(BaseModel):
    framework: Framework
    question_text: str
    response_text: str
    evaluation: HeuristicEvaluation
