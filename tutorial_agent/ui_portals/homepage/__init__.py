"""
Homepage package.

This package re-exports the `homepage_bp` blueprint from the
`ui_portals.homepage.backend` subpackage to keep imports stable::

    from tutorial_agent.ui_portals.homepage import homepage_bp

while routing logic and templates live in the dedicated `backend/` and
`frontend/` subdirectories under `ui_portals/homepage/`.
"""

# Re-export the homepage blueprint from the backend package.
from .backend import homepage_bp  # noqa: F401
