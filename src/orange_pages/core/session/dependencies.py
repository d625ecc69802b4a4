"""FastAPI dependencies for the request session."""

from typing import Annotated

from fastapi import Depends, Request

from orange_pages.core.errors import SessionPendingError
from orange_pages.core.session.context import SessionState


async def get_session(request: Request) -> SessionState | None:
    """Get the session resolved by SessionContextMiddleware.

    Returns:
        The session, or None while it is unresolved
    """
    return getattr(request.state, "session", None)


async def get_resolved_session(
    session: Annotated[SessionState | None, Depends(get_session)],
) -> SessionState:
    """Get the session, refusing requests whose session is unresolved.

    Raises:
        SessionPendingError: If no session could be resolved
    """
    if session is None or session.is_loading:
        raise SessionPendingError()
    return session


CurrentSession = Annotated[SessionState | None, Depends(get_session)]
ResolvedSession = Annotated[SessionState, Depends(get_resolved_session)]
