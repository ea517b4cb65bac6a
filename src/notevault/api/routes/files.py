"""File opening endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from notevault.core.settings import Settings
from notevault.vault.files import open_file

router = APIRouter()


class OpenFileRequest(BaseModel):
    """Request to open a linked file with the default application."""

    model_config = ConfigDict(populate_by_name=True)

    settings: Settings
    relative_path: str = Field(
        alias="relativePath", description="Vault-relative or absolute path"
    )


class OpenFileResponse(BaseModel):
    """Absolute path handed to the OS."""

    path: str


@router.post("/files/open", response_model=OpenFileResponse)
def open_file_endpoint(request: OpenFileRequest) -> OpenFileResponse:
    """Open a vault file with the OS default handler."""
    opened = open_file(request.settings, request.relative_path)
    return OpenFileResponse(path=str(opened))
