"""Session permissions module."""

from orange_pages.modules.session.routes import router


__all__ = ["router"]
