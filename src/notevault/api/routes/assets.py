"""Image, attachment and cleanup endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from notevault.api.routes.notes import RemovedAssetsResponse
from notevault.core.settings import Settings
from notevault.vault.attachments import (
    cleanup_unused_assets,
    save_attachment,
    save_image,
)

router = APIRouter()


class SaveImageRequest(BaseModel):
    """Request to store a pasted or dropped image."""

    model_config = ConfigDict(populate_by_name=True)

    settings: Settings
    note_path: str = Field(alias="notePath")
    base64: str = Field(description="Image bytes, standard base64")
    extension: str = Field(default="png", description="File extension")


class SaveImageResponse(BaseModel):
    """Location of a stored image."""

    model_config = ConfigDict(populate_by_name=True)

    relative_path: str = Field(alias="relativePath")
    markdown: str


class SaveAttachmentRequest(BaseModel):
    """Request to store an attached file."""

    model_config = ConfigDict(populate_by_name=True)

    settings: Settings
    note_path: str = Field(alias="notePath")
    base64: str = Field(description="File bytes, standard base64")
    original_name: str = Field(alias="originalName")


class SaveAttachmentResponse(BaseModel):
    """Location and label of a stored attachment."""

    model_config = ConfigDict(populate_by_name=True)

    relative_path: str = Field(alias="relativePath")
    display_name: str = Field(alias="displayName")
    markdown: str


class CleanupRequest(BaseModel):
    """Request to remove assets the markdown no longer references."""

    model_config = ConfigDict(populate_by_name=True)

    settings: Settings
    note_path: str = Field(alias="notePath")
    markdown: str


@router.post("/assets/images", response_model=SaveImageResponse)
def save_image_endpoint(request: SaveImageRequest) -> SaveImageResponse:
    """Store an image in the note's asset directory."""
    saved = save_image(
        request.settings, request.note_path, request.base64, request.extension
    )
    return SaveImageResponse(relative_path=saved.relative_path, markdown=saved.markdown)


@router.post("/assets/attachments", response_model=SaveAttachmentResponse)
def save_attachment_endpoint(request: SaveAttachmentRequest) -> SaveAttachmentResponse:
    """Store an attachment in the note's asset directory."""
    saved = save_attachment(
        request.settings, request.note_path, request.base64, request.original_name
    )
    return SaveAttachmentResponse(
        relative_path=saved.relative_path,
        display_name=saved.display_name,
        markdown=saved.markdown,
    )


@router.post("/assets/cleanup", response_model=RemovedAssetsResponse)
def cleanup_endpoint(request: CleanupRequest) -> RemovedAssetsResponse:
    """Delete unreferenced files from the note's asset directory."""
    removed = cleanup_unused_assets(
        request.settings, request.note_path, request.markdown
    )
    return RemovedAssetsResponse(removed_assets=removed)
