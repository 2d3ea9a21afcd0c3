import sys
from pathlib import Path
from contextlib import asynccontextmanager

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.logfire_config import log_info, log_warning, instrument_fastapi
from routers import reference_router, survey_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    sheets = settings.google_sheets
    log_info(
        "Survey Insights API starting up...",
        interests_range=sheets.interests_range,
        ratings_range=sheets.ratings_range,
    )
    if not sheets.id:
        log_warning("GOOGLE_SHEETS_ID not set - survey endpoints will fail until it is configured")

    yield

    log_info("Survey Insights API shutting down")


app = FastAPI(
    title="Survey Insights API",
    description="Read-only statistics over the survey spreadsheet",
    version="1.0.0",
    lifespan=lifespan
)

# Instrument FastAPI with Logfire for automatic request/response logging
instrument_fastapi(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(survey_router)
app.include_router(reference_router)


@app.get("/")
async def root():
    return {"status": "ok", "service": "Survey Insights API"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.server.host, port=settings.server.port, reload=True)
