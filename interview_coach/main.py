import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from interview_coach.config import get_settings
from interview_coach.api import evaluate, frameworks
from interview_coach.custom_logging import configure_logging
from interview_coach.utils.response import create_response
import interview_coach.databases.postgres.model as models
from interview_coach.databases.postgres.database import engine

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    description="""
    Practice product management interview questions and get framework based feedback.
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.on_event("startup")
def on_startup() -> None:
    """Create tables when the app starts."""
    logging.info("App startup: ensuring database tables exist")
    try:
        models.Base.metadata.create_all(bind=engine)
    except Exception as e:
        logging.error(f"Failed to create tables on startup: {e}")
        raise


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    return JSONResponse(
        status_code=400,
        content=create_response(False, "Request invalid", None, {"detail": jsonable_encoder(exc.errors())})
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content=create_response(False, exc.detail, None, None)
    )

app.include_router(evaluate.router, tags=["Evaluate"], prefix="/api/v1")
app.include_router(frameworks.router, tags=["Frameworks"], prefix="/api/v1")


@app.get("/")
async def root():
    return {"message": "Interview Coach Server running..."}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health Check Endpoint"""
    return {
        "status": "healthy",
        "services": {
            "api": "up",
            "completion": "configured" if settings.completion_api_key else "heuristic-only",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
