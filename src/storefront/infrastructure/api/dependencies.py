"""Request-scoped access to the process container."""

from __future__ import annotations

from fastapi import Request

from storefront.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container
