import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("COMPLETION_API_KEY", "")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from interview_coach.databases.postgres.database import Base
import interview_coach.databases.postgres.model  # noqa: F401  registers the tables
from interview_coach.services.completion_service import CompletionService
from interview_coach.services.retry_policy import RetryPolicy
from tests.helper import RecordingSleep


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def completion_service(recording_sleep):
    return CompletionService(
        api_key="theKey",
        api_url="https://completion.example/v1/chat/completions",
        model="theModel",
        temperature=0.7,
        max_tokens=2000,
        timeout=30,
        retry_policy=RetryPolicy(max_attempts=3, base_delay=1.0),
        sleep=recording_sleep,
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
