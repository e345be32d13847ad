"""Endpoint do formulário de contato.

Endpoint único, despachado pelo método:
- OPTIONS /contact (e /contact/): preflight CORS (204, corpo vazio)
- POST /contact: submissão multipart/urlencoded → relay por email
- demais métodos: 405

Toda resposta, inclusive de erro, carrega os headers CORS fixos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from api.routes.contact.client_ip import resolve_client_ip
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_contact_form_settings

if TYPE_CHECKING:
    from starlette.datastructures import FormData

    from app.use_cases.contact import RelayContactSubmissionUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"
_FORM_MEDIA_TYPES = frozenset({"multipart/form-data", "application/x-www-form-urlencoded"})

# Lazy-loaded use case (inicializado na primeira submissão)
_relay_use_case = None


class InvalidFormDataError(ValueError):
    """Corpo da requisição não é um formulário decodificável."""


def _get_relay_use_case() -> RelayContactSubmissionUseCase:
    global _relay_use_case
    if _relay_use_case is None:
        from app.bootstrap.dependencies import create_relay_use_case

        _relay_use_case = create_relay_use_case()
    return _relay_use_case


def cors_headers(allowed_origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


async def read_form(request: Request) -> FormData:
    """Decodifica o corpo como formulário.

    Raises:
        InvalidFormDataError: Content-Type não é de formulário ou o corpo
            está malformado.
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type not in _FORM_MEDIA_TYPES:
        raise InvalidFormDataError(f"unsupported_content_type:{media_type or 'none'}")
    try:
        return await request.form()
    except (MultiPartException, HTTPException, KeyError) as exc:
        raise InvalidFormDataError(str(exc)) from exc


async def contact_endpoint(request: Request) -> Response:
    """Despacha preflight, submissão ou 405 conforme o método."""
    headers = cors_headers(get_contact_form_settings().allowed_origin)

    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)

    if request.method != "POST":
        return JSONResponse(
            {"error": "Method Not Allowed"},
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers=headers,
        )

    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        try:
            form = await read_form(request)
        except InvalidFormDataError as exc:
            logger.warning(
                "contact_form_invalid",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return JSONResponse(
                {"error": "Invalid form data"},
                status_code=status.HTTP_400_BAD_REQUEST,
                headers=headers,
            )

        try:
            outcome = await _get_relay_use_case().execute(
                fields=form,
                client_ip=resolve_client_ip(request.headers),
            )
        finally:
            await form.close()

        return JSONResponse(outcome.body, status_code=outcome.status_code, headers=headers)
    finally:
        reset_correlation_id(token)


# methods=[]: o Route do Starlette não filtra método (None viraria só GET),
# então TRACE, PROPFIND etc. também recebem o 405 JSON com headers CORS.
# As duas formas do path evitam o redirect 307 de barra final, que sairia sem CORS.
CONTACT_PATHS = ("/contact", "/contact/")
for _path in CONTACT_PATHS:
    router.add_route(_path, contact_endpoint, methods=[], include_in_schema=False)
