import io
import shutil
import pytest
from starlette.datastructures import UploadFile

from drive.errors import AlreadyExists, InvalidName, IOFailure, NotFound, RootNotAvailable
from drive.service import DriveService


def test_root_must_exist(tmp_path):
    with pytest.raises(RootNotAvailable):
        DriveService(tmp_path / "missing")


def test_root_must_be_a_directory(tmp_path):
    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("x")
    with pytest.raises(RootNotAvailable):
        DriveService(not_a_dir)


@pytest.mark.parametrize("name", ["a", "MyFolder", "Z9", "abc123XYZ"])
def test_created_folder_is_listed(drive, name):
    drive.create_folder(name)
    records = [r.to_json() for r in drive.list_root()]
    assert {"name": name, "isFolder": True} in records


@pytest.mark.parametrize("name", ["My-Folder", "a b", "x.y", "ü"])
def test_invalid_folder_name_creates_nothing(drive, drive_root, name):
    with pytest.raises(InvalidName):
        drive.create_folder(name)
    assert drive.list_root() == []


def test_second_create_fails(drive):
    drive.create_folder("MyFolder")
    before = drive.list_root()
    with pytest.raises(AlreadyExists):
        drive.create_folder("MyFolder")
    assert drive.list_root() == before


@pytest.mark.asyncio
async def test_delete_folder_removes_descendants(drive, drive_root):
    drive.create_folder("projectA")
    await drive.upload(UploadFile(file=io.BytesIO(b"x"), filename="x"), parent="projectA")

    drive.delete("projectA")
    assert "projectA" not in [r.name for r in drive.list_root()]
    assert not (drive_root / "projectA").exists()


def test_browse_after_delete(drive):
    drive.create_folder("MyFolder")
    drive.delete("MyFolder")
    with pytest.raises(NotFound):
        drive.browse("MyFolder")


def test_list_root_after_root_removed(drive, drive_root):
    shutil.rmtree(drive_root)
    with pytest.raises(IOFailure):
        drive.list_root()
