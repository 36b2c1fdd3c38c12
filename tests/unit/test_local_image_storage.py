"""
Unit tests for LocalImageStorage.
"""
import pytest

from inspection_backend.infrastructure.storage.local_image_storage import LocalImageStorage


class TestLocalImageStorage:
    @pytest.mark.asyncio
    async def test_store_and_read(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path))

        url = await storage.store("INS-001", "thermal.jpg", b"\xff\xd8jpeg")

        assert url == "/files/inspections/INS-001/thermal.jpg"
        assert (tmp_path / "inspections" / "INS-001" / "thermal.jpg").read_bytes() == b"\xff\xd8jpeg"
        assert await storage.read(url) == b"\xff\xd8jpeg"

    @pytest.mark.asyncio
    async def test_store_strips_directories_from_filename(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path))

        url = await storage.store("INS-001", "../../etc/passwd", b"data")

        assert url == "/files/inspections/INS-001/passwd"
        assert (tmp_path / "inspections" / "INS-001" / "passwd").exists()

    @pytest.mark.asyncio
    async def test_store_without_filename(self, tmp_path):
        url = await LocalImageStorage(str(tmp_path)).store("INS-001", None, b"data")
        assert url == "/files/inspections/INS-001/image"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["/other/a.jpg", "/files/../secret.txt"])
    async def test_read_rejects_foreign_urls(self, tmp_path, url):
        storage = LocalImageStorage(str(tmp_path / "uploads"))
        with pytest.raises(ValueError):
            await storage.read(url)

    @pytest.mark.asyncio
    async def test_read_missing_file(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path))
        with pytest.raises(FileNotFoundError):
            await storage.read("/files/inspections/INS-001/missing.jpg")

    def test_base_dir_from_settings(self, mock_settings):
        assert str(LocalImageStorage().base_dir) == mock_settings.upload_dir
