import pytest
import pytest_asyncio
import sys
import httpx
from pathlib import Path
from fastapi.testclient import TestClient

# Add the project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from shared.config import Settings
from drive.server import create_app
from drive.service import DriveService


def create_test_settings(root_dir, static_dir, test_port=3001):
    return Settings(
        root_dir=Path(root_dir),
        http_port=test_port,
        host="127.0.0.1",
        static_dir=Path(static_dir),
    )


@pytest.fixture
def drive_root(tmp_path):
    """Create an empty drive root for one test"""
    root = tmp_path / "drive_root"
    root.mkdir()
    return root


@pytest.fixture
def test_settings(drive_root, tmp_path):
    # static_dir points at a directory that does not exist: no front-end mount
    return create_test_settings(drive_root, tmp_path / "no_frontend")


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(app):
    """Create an async test client"""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def drive(drive_root):
    return DriveService(drive_root)


@pytest.fixture
def populated_root(drive_root):
    """
    Root with a folder holding one file, a loose file, and an entry whose
    name would not pass the alphanumeric check.
    """
    (drive_root / "photos").mkdir()
    (drive_root / "photos" / "cat").write_bytes(b"meow")
    (drive_root / "notes").write_bytes(b"hello world")
    (drive_root / "odd name.txt").write_text("legacy")
    return drive_root
