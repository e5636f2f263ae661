"""
media.py - Read local image files into data URIs

Uploads whose MIME type is not ``image/*`` are ignored: the helpers return
``None`` and the caller leaves its state untouched.
"""

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from blogcraft.core.models import MediaAsset
from blogcraft.utils.logging_helper import get_logger

log = get_logger()


@dataclass(frozen=True)
class MediaUpload:
    """A file picked by the user, with its declared MIME type."""

    name: str
    content_type: str
    data: bytes

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


def load_upload(path: Path) -> MediaUpload:
    """Read *path* and guess its MIME type from the file name."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Media file not found: {path}")
    content_type, _ = mimetypes.guess_type(path.name)
    return MediaUpload(
        name=path.name,
        content_type=content_type or "application/octet-stream",
        data=path.read_bytes(),
    )


def image_data_uri(upload: MediaUpload) -> Optional[str]:
    """Data URI for an image upload, ``None`` for anything else."""
    if not upload.is_image:
        log.debug(f"Ignoring non-image upload {upload.name} ({upload.content_type})")
        return None
    return upload.to_data_uri()


def image_asset(upload: MediaUpload) -> Optional[MediaAsset]:
    uri = image_data_uri(upload)
    if uri is None:
        return None
    return MediaAsset(kind="image", uri=uri, name=upload.name)
