"""Guest-mode persistence: one JSON blob on the local device."""

import asyncio
import os
from pathlib import Path
from uuid import uuid4

from pydantic import ValidationError

from src.seo_center.core.logging import get_logger
from src.seo_center.schemas.store import StoreData

logger = get_logger(__name__)


class LocalPersistence:
    """Reads and writes the whole guest snapshot under a fixed key.

    The key maps to ``<data_dir>/<key>.json``. It is distinct from anything
    the cloud store writes, so guest data survives sign-in untouched.
    """

    def __init__(self, data_dir: Path, key: str = "seo-platform"):
        self.path = Path(data_dir) / f"{key}.json"

    def _read(self) -> StoreData:
        try:
            raw = self.path.read_text("utf-8")
        except FileNotFoundError:
            return StoreData()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Local store unreadable, starting empty", path=str(self.path), error=str(e))
            return StoreData()

        try:
            return StoreData.model_validate_json(raw)
        except ValidationError as e:
            # Corrupt data is treated as no data yet
            logger.warning(
                "Local store corrupt, starting empty",
                path=str(self.path),
                error_count=e.error_count(),
            )
            return StoreData()

    def _write(self, data: StoreData) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.stem}.{uuid4().hex}.tmp")
        try:
            tmp_path.write_text(data.model_dump_json(by_alias=True), "utf-8")
            os.replace(tmp_path, self.path)
        finally:
            tmp_path.unlink(missing_ok=True)

    async def load(self) -> StoreData:
        """Return the stored snapshot, or an empty one if missing or corrupt."""
        return await asyncio.to_thread(self._read)

    async def save(self, data: StoreData) -> None:
        """Overwrite the stored snapshot atomically."""
        await asyncio.to_thread(self._write, data)
        logger.debug(
            "Local store saved",
            projects=len(data.projects),
            tasks=len(data.tasks),
            history=len(data.history),
        )
