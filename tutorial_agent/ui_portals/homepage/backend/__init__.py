"""
Backend package for the homepage.

This module defines the `homepage_bp` blueprint which owns:
- The HTML form page under the `/` URL prefix (root).
- The homepage Jinja templates in `frontend/templates/`.

The page submits to `/api/analyze` from the browser and renders the returned
tutorial client-side, so this blueprint only serves the HTML shell.
"""

# Import Flask primitives to render the HTML shell.
from flask import Blueprint, current_app, render_template

# Import the video type choices offered by the form
from tutorial_agent.models import VideoType

# Create the homepage blueprint that encapsulates all related routes.
homepage_bp = Blueprint(
    "homepage",  # Blueprint name for `url_for("homepage.*")`.
    __name__,  # Module name; Flask uses this as a base for path resolution.
    url_prefix="/",  # URL prefix for all routes on this page (root).
    # Templates live under `ui_portals/homepage/frontend/templates/`.
    template_folder="../frontend/templates",
)

# Radio button labels shown on the form, in display order
VIDEO_TYPE_LABELS = (
    (VideoType.LONG.value, "Long Video"),
    (VideoType.SHORT.value, "Short Video (YouTube Shorts)"),
)


@homepage_bp.route("/")
def homepage_home():
    """
    Render the main homepage with the analyze form.
    """
    return render_template(
        "homepage.html",
        app_name=current_app.config["APP_NAME"],
        video_types=VIDEO_TYPE_LABELS,
        default_video_type=VideoType.LONG.value,
    )
