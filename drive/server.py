# tmpdrive/drive/server.py

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response, StreamingResponse
from fastapi.staticfiles import StaticFiles
from starlette.background import BackgroundTask
from starlette.datastructures import UploadFile

from drive.errors import DriveError
from drive.service import DriveService
from drive.transfer import iter_chunks
from shared.config import Settings
from shared.logging_config import setup_logger

# Set up logger
logger = setup_logger(__name__)

router = APIRouter(prefix="/api/drive")


def get_drive(request: Request) -> DriveService:
    return request.app.state.drive


async def drive_error_handler(request: Request, exc: DriveError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def _listing_response(entries):
    return JSONResponse([entry.to_json() for entry in entries])


@router.get("")
def list_root(drive: DriveService = Depends(get_drive)):
    """List every entry directly under the root."""
    return _listing_response(drive.list_root())


@router.get("/{name}")
def browse(name: str, drive: DriveService = Depends(get_drive)):
    """
    List a folder at the root, or stream a file at the root as raw bytes.
    """
    result = drive.browse(name)
    if result.is_folder:
        return _listing_response(result.listing)
    # Closing in the background task covers clients that stop reading mid-stream
    return StreamingResponse(
        iter_chunks(result.stream),
        media_type="application/octet-stream",
        background=BackgroundTask(result.stream.close),
    )


@router.post("")
def create_root_folder(
    name: Optional[str] = Query(None, description="Name of the folder to create"),
    drive: DriveService = Depends(get_drive),
):
    drive.create_folder(name)
    return PlainTextResponse("Folder created successfully", status_code=201)


@router.post("/{parent_folder_name}")
def create_child_folder(
    parent_folder_name: str,
    name: Optional[str] = Query(None, description="Name of the folder to create"),
    drive: DriveService = Depends(get_drive),
):
    drive.create_folder(name, parent=parent_folder_name)
    return PlainTextResponse("Folder created successfully", status_code=201)


@router.delete("/{name}")
def delete_root_entry(name: str, drive: DriveService = Depends(get_drive)):
    drive.delete(name)
    return Response(status_code=204)


@router.delete("/{parent_folder_name}/{name}")
def delete_child_entry(parent_folder_name: str, name: str, drive: DriveService = Depends(get_drive)):
    drive.delete(name, parent=parent_folder_name)
    return Response(status_code=204)


async def _upload(request: Request, drive: DriveService, parent: Optional[str]):
    # Only the "file" field is read; a plain text value under that name counts as no file
    async with request.form() as form:
        file = form.get("file")
        if not isinstance(file, UploadFile):
            file = None
        await drive.upload(file, parent=parent)
    return PlainTextResponse("File uploaded successfully", status_code=201)


@router.put("")
async def upload_to_root(request: Request, drive: DriveService = Depends(get_drive)):
    """Upload the multipart field "file" into the root."""
    return await _upload(request, drive, parent=None)


@router.put("/{parent_folder_name}")
async def upload_to_parent(parent_folder_name: str, request: Request, drive: DriveService = Depends(get_drive)):
    """Upload the multipart field "file" into an existing folder at the root."""
    return await _upload(request, drive, parent=parent_folder_name)


def create_app(settings: Settings) -> FastAPI:
    """
    Build the application around one drive root.

    Raises RootNotAvailable if settings.root_dir is not an existing directory.
    """
    app = FastAPI(title="tmpdrive")
    app.state.drive = DriveService(settings.root_dir)
    app.add_exception_handler(DriveError, drive_error_handler)

    @app.get("/ping")
    async def ping():
        """Simple endpoint to check if the server is online"""
        logger.debug("Received ping request")
        return {"status": "online"}

    app.include_router(router)

    # Front-end assets, if present. Mounted last so API routes win.
    static_dir = Path(settings.static_dir) if settings.static_dir else None
    if static_dir is not None and static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="frontend")
        logger.info(f"Serving front-end assets from {static_dir}")
    else:
        logger.debug(f"No front-end directory at {static_dir}, static hosting disabled")

    return app
