import sys
from pathlib import Path

import pytest

# Ensure the project root is on the import path so ``blogcraft`` can be imported
root_path = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root_path))

from blogcraft.core.media import MediaUpload  # noqa: E402

PNG_BYTES = b"\x89PNG"


@pytest.fixture()
def png_upload():
    return MediaUpload(name="cat.png", content_type="image/png", data=PNG_BYTES)


@pytest.fixture()
def text_upload():
    return MediaUpload(name="notes.txt", content_type="text/plain", data=b"hello")
