from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from interview_coach.models.evaluation import EvaluationSource, FeedbackBreakdown, HeuristicEvaluation
from interview_coach.models.framework import Framework


class EvaluateRequest(BaseModel):
    """Evaluation Request"""
    transcript: str = Field("", description="Candidate response, typed or transcribed")
    question_text: str = Field(...)
    framework: Optional[str] = Field(None, description="Framework id; detected from the transcript when omitted")
    user_id: Optional[str] = None
    question_id: Optional[str] = None

    @field_validator('question_text')
    def validate_question_text(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError('Question text cannot be empty')
        return v.strip()


class EvaluateResponse(BaseModel):
    """Evaluation response"""
    response_id: int
    framework: Framework
    overall_score: float
    feedback_text: str
    source: EvaluationSource


class FeedbackResponse(BaseModel):
    response_id: int
    framework: Framework
    transcript: str
    feedback_text: str
    overall_score: float
    source: EvaluationSource
    breakdown: FeedbackBreakdown


class DetectFrameworkRequest(BaseModel):
    transcript: str = ""


class DetectFrameworkResponse(BaseModel):
    framework: Framework
    display_name: str


class FrameworkInfo(BaseModel):
    framework: Framework
    display_name: str
    sections: List[str]


class IdealResponseRequest(BaseModel):
    question_text: str = Field(...)
    framework: Optional[str] = None

    @field_validator('question_text')
    def validate_question_text(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError('Question text cannot be empty')
        return v.strip()


class IdealResponseResponse(BaseModel):
    framework: Framework
    response_text: str
    overall_score: float
    evaluation: HeuristicEvaluation


class ResponseSummary(BaseModel):
    """One stored response in a user's history"""
    response_id: int
    question_id: Optional[str] = None
    framework: Framework
    overall_score: Optional[float] = None
    source: Optional[EvaluationSource] = None
    created_at: Optional[datetime] = None
