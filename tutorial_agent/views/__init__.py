from __future__ import annotations

from .analyze import analyze_bp

__all__ = ["analyze_bp"]
