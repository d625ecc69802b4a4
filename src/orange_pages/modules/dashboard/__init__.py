"""Member dashboard module."""

from orange_pages.modules.dashboard.routes import router


__all__ = ["router"]
