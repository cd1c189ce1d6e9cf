"""FastAPI application for the code review agent."""

import asyncio
import logging
import secrets

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import ReviewSettings, load_settings
from .models import ReviewReport
from .pipeline import run_review

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Code Review Agent",
    description="Scans JavaScript/TypeScript sources, grades each file and proposes automatic fixes",
    version="0.1.0",
)

# CORS - allow common development origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8000",
    ],
    allow_methods=["GET"],
    allow_headers=["*"],
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings() -> ReviewSettings:
    try:
        return load_settings()
    except ValueError as e:
        logger.error(f"Review failed: {e}")
        raise HTTPException(status_code=500, detail=f"Review failed: {str(e)}")


def require_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: ReviewSettings = Depends(get_settings),
) -> str:
    """Validate the bearer credential.

    When no API token is configured, any well-formed bearer credential is
    accepted (verification is left to the gateway in front of the service).
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access denied. No token provided.")

    token = credentials.credentials
    if settings.api_token and not secrets.compare_digest(token, settings.api_token):
        raise HTTPException(status_code=401, detail="Invalid or expired token.")

    return token


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/code-review/run", response_model=ReviewReport)
async def run(
    _token: str = Depends(require_token),
    settings: ReviewSettings = Depends(get_settings),
) -> ReviewReport:
    """
    Review every configured source root and return the project report.

    Roots, extensions and excluded directories come from the CODE_REVIEW_*
    environment variables.
    """
    try:
        logger.info(f"Running code review under {settings.project_root} (roots: {', '.join(settings.roots)})")

        return await asyncio.to_thread(
            run_review,
            settings.resolved_roots(),
            settings.extensions,
            settings.excluded_dirs,
            settings.project_root,
            settings.max_workers,
        )

    except Exception as e:
        logger.error(f"Review failed: {e}")
        raise HTTPException(status_code=500, detail=f"Review failed: {str(e)}")
