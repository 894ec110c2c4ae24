from __future__ import annotations

import os
import random
import time
from pathlib import Path
from typing import Callable, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..core.constants import ALLOWED_UPLOAD_TYPES, DEFAULT_MAX_UPLOAD_BYTES
from ..core.exceptions import ValidationError

INVALID_UPLOAD = "No file uploaded or invalid file type"


def unique_filename(original: str, *, now: Optional[Callable[[], float]] = None) -> str:
    """`<epoch millis>-<random>` plus the original extension."""
    millis = int((now or time.time)() * 1000)
    suffix = round(random.random() * 1e9)
    ext = os.path.splitext(secure_filename(original or ""))[1].lower()
    return f"{millis}-{suffix}{ext}"


def _stream_size(file: FileStorage) -> int:
    stream = file.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


class UploadService:
    """Store uploaded images on local disk. Files are never cleaned up."""

    def __init__(self, upload_dir: str | Path, *, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES):
        self._upload_dir = Path(upload_dir)
        self._max_bytes = int(max_bytes)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def save_image(self, file: Optional[FileStorage]) -> str:
        if file is None or not file.filename:
            raise ValidationError(INVALID_UPLOAD)
        if file.mimetype not in ALLOWED_UPLOAD_TYPES:
            raise ValidationError(INVALID_UPLOAD)
        if _stream_size(file) > self._max_bytes:
            raise ValidationError(f"File too large (max {self._max_bytes // (1024 * 1024)} MB)")

        self._upload_dir.mkdir(parents=True, exist_ok=True)
        filename = unique_filename(file.filename)
        file.save(self._upload_dir / filename)
        return filename
