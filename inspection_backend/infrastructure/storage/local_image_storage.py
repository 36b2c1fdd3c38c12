"""Local filesystem storage for inspection images."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

from ...core.config import get_settings

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/files/"


class LocalImageStorage:
    """
    Stores images under <upload_dir>/inspections/<inspection_number>/<filename>
    and addresses them by public URL /files/inspections/<inspection_number>/<filename>.
    """

    def __init__(self, base_dir: Optional[str] = None) -> None:
        self.base_dir = Path(base_dir or get_settings().upload_dir)

    async def store(self, inspection_number: str, filename: Optional[str], data: bytes) -> str:
        # final path component only; keeps writes inside the inspection folder
        safe_name = Path(filename or "").name or "image"
        target_dir = self.base_dir / "inspections" / Path(inspection_number).name
        target = target_dir / safe_name

        def _write() -> None:
            target_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        await asyncio.to_thread(_write)
        url = f"{PUBLIC_PREFIX}inspections/{target_dir.name}/{safe_name}"
        logger.info(f"Stored inspection image {url} ({len(data)} bytes)")
        return url

    async def read(self, url: str) -> bytes:
        if not url.startswith(PUBLIC_PREFIX):
            raise ValueError(f"Not a stored image URL: {url}")

        base = self.base_dir.resolve()
        path = (base / url[len(PUBLIC_PREFIX):]).resolve()
        if base not in path.parents:
            raise ValueError(f"Image URL escapes storage directory: {url}")
        return await asyncio.to_thread(path.read_bytes)
