import uuid
from collections.abc import AsyncIterator
from pathlib import Path

import aiofiles
import aiofiles.os

from app.logging.logger import Log
from app.processor.exceptions import FileTooLargeError


class UploadFileStore:
    """Keeps uploaded files on disk until their pipeline run finishes."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def path_for(self, suffix: str) -> Path:
        """Build a unique temp path: {root}/{uuid}{suffix}"""
        return self._root / f"{uuid.uuid4().hex}{suffix}"

    async def save(
        self,
        chunks: AsyncIterator[bytes],
        *,
        suffix: str,
        max_bytes: int,
    ) -> tuple[Path, int]:
        """Stream chunks to a new temp file.

        Returns:
            The file path and the number of bytes written.

        Raises:
            FileTooLargeError: if more than ``max_bytes`` arrive. The partial
                file is removed before raising.
        """
        await aiofiles.os.makedirs(self._root, exist_ok=True)
        path = self.path_for(suffix)
        size = 0
        try:
            async with aiofiles.open(path, "wb") as out:
                async for chunk in chunks:
                    size += len(chunk)
                    if size > max_bytes:
                        raise FileTooLargeError(
                            f"File exceeds the {max_bytes // (1024 * 1024)} MB limit"
                        )
                    await out.write(chunk)
        except BaseException:
            await self.remove(path)
            raise
        return path, size

    async def remove(self, path: Path) -> None:
        """Delete a temp file. Failures are logged, never raised."""
        try:
            await aiofiles.os.remove(path)
            Log.info(f"Deleted temporary file {path}")
        except FileNotFoundError:
            Log.debug(f"Temporary file already removed: {path}")
        except OSError as exc:
            Log.warning(f"Failed to delete temporary file {path}: {exc}")
