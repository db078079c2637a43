"""Directory-backed object bucket for task attachments.

Objects live under ``<root>/<bucket>/<path>`` and are served publicly at
``<public_base_url>/<bucket>/<path>``. Authorization is by path prefix and is
enforced by the caller (see RemotePersistence).
"""

import asyncio
import base64
import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from src.seo_center.core.exceptions import AttachmentError
from src.seo_center.core.logging import get_logger

logger = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True, slots=True)
class AttachmentUpload:
    """An image file handed to the store by the UI."""

    filename: str
    content_type: str
    data: bytes

    def as_data_uri(self) -> str:
        """Self-contained encoding used when no object store is available."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


def safe_filename(filename: str) -> str:
    """Reduce a client-supplied name to a single safe path segment."""
    name = PurePosixPath(filename.replace("\\", "/")).name
    name = _UNSAFE_CHARS.sub("-", name).strip(".-")
    return name or "attachment"


class ObjectStorage:
    """Bucket of binary objects addressed by relative POSIX paths."""

    def __init__(self, root: Path, bucket: str, public_base_url: str):
        self.root = Path(root)
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    def _resolve(self, path: str) -> Path:
        parts = PurePosixPath(path).parts
        if not parts or path.startswith("/") or any(part in ("..", ".") for part in parts):
            raise AttachmentError(f"Invalid object path: {path!r}")
        return self.root.joinpath(self.bucket, *parts)

    def public_url(self, path: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{path}"

    def path_from_url(self, url: str) -> str | None:
        """Object path of a URL issued by this bucket, or None for anything else."""
        marker = f"/{self.bucket}/"
        if url.startswith("data:") or marker not in url:
            return None
        path = url.split(marker, 1)[1]
        return path or None

    async def upload(self, path: str, data: bytes) -> None:
        """Write a new object. Existing objects are never overwritten."""
        target = self._resolve(path)

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("xb") as fh:
                fh.write(data)

        try:
            await asyncio.to_thread(_write)
        except FileExistsError as e:
            raise AttachmentError(f"Object already exists: {path}") from e
        except OSError as e:
            raise AttachmentError(f"Failed to store object {path}: {e}") from e

        logger.debug("Object stored", bucket=self.bucket, path=path, size=len(data))

    async def remove(self, path: str) -> None:
        target = self._resolve(path)
        try:
            await asyncio.to_thread(target.unlink)
        except FileNotFoundError as e:
            raise AttachmentError(f"Object not found: {path}") from e
        except OSError as e:
            raise AttachmentError(f"Failed to remove object {path}: {e}") from e

        logger.debug("Object removed", bucket=self.bucket, path=path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._resolve(path).is_file)
