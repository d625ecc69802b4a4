"""Session context and request id middleware.

This module provides middleware for:
- Resolving the session (identity plus active organization) per request
- Request tracing with unique IDs
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from orange_pages.core.constants import ORGANIZATION_HEADER
from orange_pages.core.session.context import SessionState
from orange_pages.core.session.tokens import decode_session_token, session_from_claims


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()


class SessionContextMiddleware(BaseHTTPMiddleware):
    """Middleware that resolves the session for each request.

    Sets ``request.state.session`` to:
    - an anonymous SessionState when no bearer token is sent
    - the decoded SessionState for a valid token, acting for the
      organization named in the ``X-Organization-Id`` header when the
      user still belongs to it
    - an anonymous SessionState when the header is malformed or the
      token is expired, forged or otherwise undecodable

    The session is None only on excluded paths, where nothing resolves it.

    Attributes:
        exclude_paths: Paths that skip session resolution
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or [
            "/health",
            "/docs",
            "/redoc",
            "/openapi.json",
        ]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        request.state.session = self._resolve(request)

        session = request.state.session
        if session.user_id:
            structlog.contextvars.bind_contextvars(
                user_id=session.user_id,
                organization_id=session.active_organization_id,
            )

        return await call_next(request)

    def _resolve(self, request: Request) -> SessionState:
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            return SessionState()

        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            logger.warning("session_header_malformed")
            return SessionState()

        claims = decode_session_token(token)
        if claims is None:
            logger.warning("session_token_invalid")
            return SessionState()

        preferred = request.headers.get(ORGANIZATION_HEADER) or None
        session = session_from_claims(claims, preferred)

        if preferred and session.active_organization_id != preferred:
            logger.warning(
                "organization_selection_rejected",
                user_id=session.user_id,
                requested=preferred,
                selected=session.active_organization_id,
            )

        return session


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        request.state.trace_id = request_id  # Alias for error handler

        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(
                "request_id", "user_id", "organization_id"
            )

        response.headers["X-Request-ID"] = request_id
        return response
