from sqlalchemy import Column, Float, ForeignKey, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, text

from .database import Base


class BaseAuditMixin:
    """Reusable audit columns for all tables."""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    created_by = Column(String(100), nullable=False, server_default=text("'system'"))


class Response(Base, BaseAuditMixin):
    __tablename__ = "responses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(100), nullable=True, index=True)
    question_id = Column(String(100), nullable=True, index=True)
    transcript = Column(Text, nullable=False, server_default=text("''"))
    framework = Column(String(50), nullable=False)

    # Relationships
    feedback = relationship("Feedback", back_populates="response", uselist=False, cascade="all, delete-orphan")


class Feedback(Base, BaseAuditMixin):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    response_id = Column(Integer, ForeignKey("responses.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    # Full evaluation text and the score extracted from it
    text = Column(Text, nullable=False)
    score = Column(Float, nullable=False)
    source = Column(String(20), nullable=False)
    rating = Column(Integer, nullable=True)

    # Relationships
    response = relationship("Response", back_populates="feedback")
