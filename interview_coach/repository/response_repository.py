import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

import interview_coach.databases.postgres.model as models
from interview_coach.models.evaluation import EvaluationResult


def create_response_with_feedback(
    db: Session,
    transcript: str,
    result: EvaluationResult,
    user_id: Optional[str] = None,
    question_id: Optional[str] = None,
) -> models.Response:
    """Store a candidate response together with its evaluation"""
    response = models.Response(
        user_id=user_id,
        question_id=question_id,
        transcript=transcript,
        framework=result.framework.value,
    )
    response.feedback = models.Feedback(
        text=result.full_text,
        score=result.overall_score,
        source=result.source.value,
        rating=None,
    )
    db.add(response)
    db.commit()
    db.refresh(response)
    logging.info(f"Stored response {response.id} with feedback score {result.overall_score}")
    return response


def find_response_by_id(db: Session, response_id: int) -> Optional[models.Response]:
    result = (
        db.query(models.Response)
        .options(joinedload(models.Response.feedback))
        .filter(models.Response.id == response_id)
        .first()
    )
    logging.info(f"Result query: {result}")
    return result


def find_responses_by_user(db: Session, user_id: str, limit: Optional[int] = None) -> List[models.Response]:
    """Fetch a user's responses, newest first"""
    query = (
        db.query(models.Response)
        .options(joinedload(models.Response.feedback))
        .filter(models.Response.user_id == user_id)
        .order_by(models.Response.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)
    result = query.all()
    logging.info(f"Result query: {len(result)} responses for user {user_id}")
    return result
