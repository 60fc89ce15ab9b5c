"""File input handling shared by the multipart upload endpoints"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

FileInput = Union[str, Path, BinaryIO]

PDF_EXTENSIONS = frozenset({".pdf"})
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
MAX_PROFILE_IMAGE_BYTES = 5 * 1024 * 1024

_CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}


def _size_of(file_obj: BinaryIO) -> int:
    position = file_obj.tell()
    file_obj.seek(0, os.SEEK_END)
    size = file_obj.tell()
    file_obj.seek(position)
    return size


@contextmanager
def open_upload(
    file: FileInput,
    allowed_extensions: frozenset,
    max_bytes: Optional[int] = None,
) -> Iterator[Tuple[str, BinaryIO, str]]:
    """
    Yield (filename, file object, content type) for a path or file-like object.

    Paths are opened and closed here; caller-owned file objects are left open.

    Raises:
        ValueError: If the extension is not allowed or the file is too large
    """
    if isinstance(file, (str, Path)):
        filename = Path(file).name
    else:
        filename = Path(getattr(file, "name", "file")).name

    extension = Path(filename).suffix.lower()
    if extension not in allowed_extensions:
        allowed = ", ".join(sorted(allowed_extensions))
        raise ValueError(f"Unsupported file type '{extension or filename}' (allowed: {allowed})")

    if isinstance(file, (str, Path)):
        file_obj = open(file, "rb")
        close_file = True
    else:
        file_obj = file
        close_file = False

    try:
        if max_bytes is not None and _size_of(file_obj) > max_bytes:
            raise ValueError(f"File must be smaller than {max_bytes // (1024 * 1024)}MB")
        yield filename, file_obj, _CONTENT_TYPES[extension]
    finally:
        if close_file:
            file_obj.close()
