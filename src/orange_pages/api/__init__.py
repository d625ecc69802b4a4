"""HTTP API routers."""

from orange_pages.api.router import api_router


__all__ = ["api_router"]
