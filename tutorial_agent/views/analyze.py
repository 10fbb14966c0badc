from __future__ import annotations

import logging

from flask import Blueprint, jsonify
from werkzeug.exceptions import HTTPException

from ..errors import AnalyzeError, InvalidVideoUrlError, MissingVideoUrlError
from ..lib.utils import extract_video_id, fetch_video_meta
from ..models import TutorialRequest
from ..tutorials import generate_tutorial
from .middleware import require_json_body

logger = logging.getLogger(__name__)

analyze_bp = Blueprint("analyze", __name__, url_prefix="/api")


@analyze_bp.errorhandler(AnalyzeError)
def _on_analyze_error(err: AnalyzeError):
    if err.status_code >= 500:
        logger.error("analyze failed: %s", err.message, exc_info=err)
    else:
        logger.warning("analyze rejected: %s", err.message)
    return jsonify(err.to_dict()), err.status_code


@analyze_bp.errorhandler(Exception)
def _on_unexpected_error(err: Exception):
    # Let werkzeug HTTP errors (413, 405, ...) keep their own status
    if isinstance(err, HTTPException):
        return err
    # Unknown failures never leak details to the caller
    logger.exception("analyze error")
    return jsonify(AnalyzeError().to_dict()), 500


@analyze_bp.post("/analyze")
@require_json_body
def analyze(body: dict):
    """Turn a YouTube URL into the editing tutorial for its video type.

    Body: {"videoUrl": str, "videoType": "long" | "short"}
    """
    req = TutorialRequest.from_json(body)
    if not req.video_url:
        raise MissingVideoUrlError()

    video_id = extract_video_id(req.video_url)
    if not video_id:
        raise InvalidVideoUrlError()

    meta = fetch_video_meta(video_id)
    tutorial = generate_tutorial(req.video_type, meta.title)
    logger.info(
        "analyze: video_id=%s type=%s title=%r", video_id, req.video_type.value, meta.title
    )
    return jsonify(tutorial.to_dict())
