from typing import List

from fastapi import APIRouter, HTTPException, Path, Query, Depends
from sqlalchemy.orm import Session
import logging

from interview_coach.databases.postgres.database import get_db
from interview_coach.models.evaluate import (
    EvaluateRequest,
    EvaluateResponse,
    FeedbackResponse,
    IdealResponseRequest,
    IdealResponseResponse,
    ResponseSummary,
)
from interview_coach.models.evaluation import EvaluationSource
from interview_coach.models.framework import Framework
from interview_coach.repository import response_repository
from interview_coach.services.evaluation_pipeline_service import EvaluationPipeline, get_evaluation_pipeline
from interview_coach.utils.feedback_parser import parse_feedback

router = APIRouter()


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_response(
    request: EvaluateRequest,
    db: Session = Depends(get_db),
    pipeline: EvaluationPipeline = Depends(get_evaluation_pipeline),
):
    """
    Analyze a candidate response and store the feedback
    """
    try:
        result = await pipeline.evaluate(
            transcript=request.transcript,
            question_text=request.question_text,
            framework=request.framework,
        )

        stored = response_repository.create_response_with_feedback(
            db,
            transcript=request.transcript,
            result=result,
            user_id=request.user_id,
            question_id=request.question_id,
        )

        logging.info(
            f"Evaluation stored: response_id={stored.id}, "
            f"framework={result.framework.value}, source={result.source.value}"
        )

        return EvaluateResponse(
            response_id=stored.id,
            framework=result.framework,
            overall_score=result.overall_score,
            feedback_text=result.full_text,
            source=result.source,
        )
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Failed to evaluate response: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to evaluate response: {str(e)}")


@router.get("/feedback/{response_id}", response_model=FeedbackResponse)
async def get_feedback(
    response_id: int = Path(..., description="Response ID from /evaluate endpoint"),
    db: Session = Depends(get_db),
):
    """Get stored feedback with its parsed breakdown"""
    try:
        response = response_repository.find_response_by_id(db, response_id)

        if not response or not response.feedback:
            raise HTTPException(
                status_code=404,
                detail=f"Feedback not found for response: {response_id}"
            )

        framework = Framework.parse(response.framework)
        return FeedbackResponse(
            response_id=response.id,
            framework=framework,
            transcript=response.transcript,
            feedback_text=response.feedback.text,
            overall_score=response.feedback.score,
            source=EvaluationSource(response.feedback.source),
            breakdown=parse_feedback(response.feedback.text, framework),
        )
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Failed to get feedback: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve feedback: {str(e)}")


@router.get("/responses", response_model=List[ResponseSummary])
async def list_responses(
    user_id: str = Query(..., description="Owner of the responses"),
    limit: int = Query(5, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """A user's most recent responses, newest first"""
    try:
        responses = response_repository.find_responses_by_user(db, user_id, limit=limit)
        return [
            ResponseSummary(
                response_id=response.id,
                question_id=response.question_id,
                framework=Framework.parse(response.framework),
                overall_score=response.feedback.score if response.feedback else None,
                source=EvaluationSource(response.feedback.source) if response.feedback else None,
                created_at=response.created_at,
            )
            for response in responses
        ]
    except Exception as e:
        logging.error(f"Failed to list responses: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to list responses: {str(e)}")


@router.post("/ideal-response", response_model=IdealResponseResponse)
async def create_ideal_response(
    request: IdealResponseRequest,
    pipeline: EvaluationPipeline = Depends(get_evaluation_pipeline),
):
    """Generate a model answer for a question and score it"""
    ideal = await pipeline.generate_ideal_response(request.question_text, request.framework)

    if ideal is None:
        raise HTTPException(
            status_code=503,
            detail="Completion service unavailable, try again later"
        )

    return IdealResponseResponse(
        framework=ideal.framework,
        response_text=ideal.response_text,
        overall_score=ideal.evaluation.overall_score,
        evaluation=ideal.evaluation,
    )
