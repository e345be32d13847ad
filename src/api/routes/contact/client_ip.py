"""Resolução do IP do cliente enviado ao siteverify."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

LOOPBACK_PLACEHOLDER = "127.0.0.1"


def resolve_client_ip(headers: Mapping[str, str]) -> str:
    """CF-Connecting-IP, depois o primeiro salto de X-Forwarded-For, depois loopback."""
    connecting_ip = (headers.get("cf-connecting-ip") or "").strip()
    if connecting_ip:
        return connecting_ip

    forwarded = headers.get("x-forwarded-for") or ""
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop

    return LOOPBACK_PLACEHOLDER
