"""Platform administration module."""

from orange_pages.modules.admin.routes import router


__all__ = ["router"]
