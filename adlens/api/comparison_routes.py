"""AdLens — Normalization & Comparison API Routes."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from adlens.analyzer.chart_projector import project, project_all
from adlens.analyzer.comparison_engine import compare, compare_entities
from adlens.connectors.registry import extract
from adlens.core.errors import AdLensError
from adlens.core.logging import get_logger
from adlens.core.metric_registry import MetricName
from adlens.models.comparison_models import ChartPoint, ComparisonResult, EntityComparison
from adlens.models.normalized_models import IdentityHints, NormalizedPerformanceRecord

logger = get_logger("api.comparison")

router = APIRouter(tags=["Comparison"])


# ── Request / Response Models ──


class ExtractRequest(BaseModel):
    """Request body for POST /extract/{platform}."""

    payload: Optional[Dict[str, Any]] = None
    """Raw account or campaign JSON, already fetched from the ad platform."""
    hints: IdentityHints = IdentityHints()


class EntitySource(BaseModel):
    """One entity to normalize: platform key, raw payload, identity hints."""

    platform: str
    payload: Optional[Dict[str, Any]] = None
    hints: IdentityHints = IdentityHints()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "platform": "google",
                    "payload": {"metrics": {"cost": "100", "clicks": "50"}},
                    "hints": {"entity_id": "123-456-7890"},
                }
            ]
        }
    }


class CompareRequest(BaseModel):
    """Request body for POST /compare."""

    primary: EntitySource
    secondary: EntitySource


class CompareEntitiesRequest(BaseModel):
    """Request body for POST /compare/entities."""

    sources: List[EntitySource]


class ChartSeriesRequest(BaseModel):
    """Request body for POST /chart-series."""

    records: List[NormalizedPerformanceRecord]
    metric: Optional[MetricName] = None
    """Single metric to project. Omit for every chart metric."""


# ── Helpers ──


def _normalize(source: EntitySource) -> Optional[NormalizedPerformanceRecord]:
    try:
        return extract(source.platform, source.payload, source.hints)
    except AdLensError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ── Endpoints ──


@router.post("/extract/{platform}")
async def extract_record(platform: str, request: ExtractRequest):
    """Normalize one raw payload into a performance record."""
    record = _normalize(
        EntitySource(platform=platform, payload=request.payload, hints=request.hints)
    )
    if record is None:
        return {"status": "no_data", "message": "No payload supplied for this entity."}
    return {"status": "success", "record": record}


@router.post("/compare", response_model=ComparisonResult)
async def compare_records(request: CompareRequest):
    """Normalize two entities and compare them metric by metric."""
    return compare(_normalize(request.primary), _normalize(request.secondary))


@router.post("/compare/entities", response_model=EntityComparison)
async def compare_entity_list(request: CompareEntitiesRequest):
    """Normalize a list of entities for multi-entity comparison views."""
    return compare_entities([_normalize(s) for s in request.sources])


@router.post("/chart-series")
async def chart_series(request: ChartSeriesRequest):
    """Project records into chart series."""
    if request.metric is not None:
        points: List[ChartPoint] = project(request.records, request.metric)
        return {"status": "success", "metric": request.metric, "series": points}
    return {"status": "success", "series": project_all(request.records)}
