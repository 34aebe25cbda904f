"""Call-stack snapshots attached to ``Err`` values at construction."""

from __future__ import annotations

import inspect
import os
import traceback
from typing import TYPE_CHECKING

from resultkit.config import get_config

if TYPE_CHECKING:
    from types import FrameType

__all__ = ["capture_stack"]

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def capture_stack(limit: int | None = None) -> str:
    """Return the formatted stack of the nearest caller outside resultkit.

    ``limit`` keeps only that many of the most recent frames and defaults to
    the configured ``provenance_limit``. Returns ``""`` when provenance
    capture is disabled.
    """
    config = get_config()
    if not config.capture_provenance:
        return ""
    if limit is None:
        limit = config.provenance_limit

    frame = _first_external_frame(inspect.currentframe())
    if frame is None:
        return ""
    try:
        return "".join(traceback.format_stack(frame, limit=limit)).rstrip("\n")
    finally:
        del frame


def _first_external_frame(frame: FrameType | None) -> FrameType | None:
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    return frame


def _is_internal(frame: FrameType) -> bool:
    filename = os.path.abspath(frame.f_code.co_filename)
    return filename.startswith(_PACKAGE_DIR)
