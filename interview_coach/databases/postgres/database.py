from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from interview_coach.config import get_settings

settings = get_settings()

engine = create_engine(settings.database_url, pool_pre_ping=True)

sessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = sessionLocal()
    try:
        yield db
    finally:
        db.close()
