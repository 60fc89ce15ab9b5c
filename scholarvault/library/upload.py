"""
PDF upload tracking

An upload moves through UPLOADING -> EXTRACTING -> DONE, or ends in FAILED.
The server extracts metadata before it answers, so EXTRACTING starts as soon
as the last byte of the file has been handed to the transport. There is no
cancellation.
"""

import io
import logging
import os
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Callable, List, Optional, Union

from ..exceptions import ScholarVaultError
from ..types.documents import Document

logger = logging.getLogger(__name__)


class UploadPhase(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    EXTRACTING = "extracting"
    DONE = "done"
    FAILED = "failed"


PhaseListener = Callable[["UploadTracker"], None]


class UploadInProgressError(ScholarVaultError):
    """Raised when starting an upload while another one is running"""
    pass


class _ProgressReader(io.RawIOBase):
    """Read-only file wrapper that reports bytes consumed by the transport"""

    def __init__(self, file_obj: BinaryIO, name: str, on_read: Callable[[int, int], None]):
        super().__init__()
        self._file = file_obj
        self.name = name
        self._on_read = on_read
        position = file_obj.tell()
        self.total = file_obj.seek(0, os.SEEK_END)
        file_obj.seek(position)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        return self._file.seek(offset, whence)

    def tell(self) -> int:
        return self._file.tell()

    def read(self, size: int = -1) -> bytes:
        chunk = self._file.read(size)
        self._on_read(self._file.tell(), self.total)
        return chunk

    def readinto(self, buffer) -> int:
        chunk = self.read(len(buffer))
        buffer[:len(chunk)] = chunk
        return len(chunk)


class UploadTracker:
    """Observable state of a single PDF upload"""

    def __init__(self):
        self.phase = UploadPhase.IDLE
        self.bytes_sent = 0
        self.total_bytes = 0
        self.document: Optional[Document] = None
        self.error: Optional[str] = None
        self._listeners: List[PhaseListener] = []

    @property
    def in_progress(self) -> bool:
        return self.phase in (UploadPhase.UPLOADING, UploadPhase.EXTRACTING)

    def subscribe(self, listener: PhaseListener) -> None:
        """Call listener(tracker) on every phase change"""
        self._listeners.append(listener)

    def run(self, upload: Callable[[BinaryIO], Document], file: Union[str, Path, BinaryIO]) -> Document:
        """
        Upload file with the given function and track its phases.

        Args:
            upload: Sends the file and returns the created document,
                    e.g. client.documents.upload
            file: PDF path or binary file object

        Raises:
            UploadInProgressError: This tracker is already running an upload
            Whatever upload raises, after moving to FAILED
        """
        if self.in_progress:
            raise UploadInProgressError("An upload is already in progress")

        self.document = None
        self.error = None
        self.bytes_sent = 0

        if isinstance(file, (str, Path)):
            with open(file, "rb") as file_obj:
                return self._run(upload, file_obj, Path(file).name)
        return self._run(upload, file, Path(getattr(file, "name", "file")).name)

    def _run(self, upload: Callable[[BinaryIO], Document], file_obj: BinaryIO, name: str) -> Document:
        reader = _ProgressReader(file_obj, name, self._on_read)
        self.total_bytes = reader.total
        self._set_phase(UploadPhase.UPLOADING)
        try:
            document = upload(reader)
        except Exception as e:
            self.error = getattr(e, "message", None) or str(e) or "Failed to upload PDF"
            self._set_phase(UploadPhase.FAILED)
            logger.warning("Upload of %s failed: %s", name, self.error)
            raise
        self.document = document
        self._set_phase(UploadPhase.DONE)
        logger.info("Uploaded %s as document %s", name, document.id)
        return document

    def _on_read(self, position: int, total: int) -> None:
        self.bytes_sent = max(self.bytes_sent, position)
        if self.phase is UploadPhase.UPLOADING and position >= total:
            self._set_phase(UploadPhase.EXTRACTING)

    def _set_phase(self, phase: UploadPhase) -> None:
        self.phase = phase
        for listener in list(self._listeners):
            listener(self)
