"""Upload-specific validators."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..core.types import Failure, Result, Success
from ..core.validators import validate_channel, validate_max_count
from .params import UploadParams


def validate_upload_params(
    params: UploadParams,
    videos_root: Optional[Path] = None,
) -> Result[UploadParams]:
    """Validate all upload parameters.

    Queue membership and existence of --file are not checked here: the
    run reports those as skipped items, not as argument errors.
    """
    channel_result = validate_channel(params.channel, videos_root)
    if isinstance(channel_result, Failure):
        return channel_result

    if not params.is_single:
        max_result = validate_max_count(params.max_count)
        if isinstance(max_result, Failure):
            return max_result

    return Success(params)
