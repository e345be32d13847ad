"""Endpoints de health check."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import collect_settings_errors
from config.settings import get_base_settings, get_contact_form_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness: secrets exigidos pelo modo ativo estão presentes.

    Não chama SendGrid nem Turnstile; apenas a configuração é checada.
    """
    errors = collect_settings_errors()
    ready = not errors
    if not ready:
        logger.warning("readiness_settings_missing", extra={"error_count": len(errors)})

    payload = {
        "status": "ready" if ready else "not_ready",
        "relay_mode": get_contact_form_settings().relay_mode,
        "errors": errors,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
