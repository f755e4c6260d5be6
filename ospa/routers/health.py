"""
Health Check Router - OSPA Scorer
ospa/routers/health.py

The scorer has no backing stores; health reports the app version and whether
the active rubrics load.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ospa.config import get_settings
from ospa.core.exceptions import RubricConfigurationException
from ospa.models.enumerations import NominationType
from ospa.scoring.rubric import get_rubric

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check():
    dependencies = {}
    for nomination_type in NominationType:
        try:
            get_rubric(nomination_type)
            dependencies[f"rubric:{nomination_type.name.lower()}"] = "healthy"
        except RubricConfigurationException as e:
            dependencies[f"rubric:{nomination_type.name.lower()}"] = f"unhealthy: {e.reason}"

    healthy = all(v == "healthy" for v in dependencies.values())
    body = HealthResponse(
        status="healthy" if healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=get_settings().APP_VERSION,
        dependencies=dependencies,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
