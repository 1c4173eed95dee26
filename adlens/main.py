"""AdLens — FastAPI Application Entry Point.

Cross-platform ad performance normalization and comparison.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adlens.api.comparison_routes import router as comparison_router
from adlens.config import settings
from adlens.core.logging import get_logger

logger = get_logger("main")


app = FastAPI(
    title="AdLens",
    description="Normalize Meta and Google Ads payloads into one schema, derive secondary metrics, and compare entities.",
    version=settings.service_version,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(comparison_router)


@app.get("/health", tags=["System"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "adlens",
        "version": settings.service_version,
    }
