"""Note endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from notevault.core.settings import Settings
from notevault.vault.notes import save_note

router = APIRouter()


class SaveNoteRequest(BaseModel):
    """Request to write a note's markdown."""

    model_config = ConfigDict(populate_by_name=True)

    settings: Settings
    note_path: str = Field(alias="notePath", description="Vault-relative note path")
    markdown: str


class RemovedAssetsResponse(BaseModel):
    """Assets deleted by a cleanup pass."""

    model_config = ConfigDict(populate_by_name=True)

    removed_assets: list[str] = Field(default_factory=list, alias="removedAssets")


@router.post("/notes", response_model=RemovedAssetsResponse)
def save_note_endpoint(request: SaveNoteRequest) -> RemovedAssetsResponse:
    """
    Save a note, then clean up its assets when autoCleanupAssets is set.
    """
    removed = save_note(request.settings, request.note_path, request.markdown)
    return RemovedAssetsResponse(removed_assets=removed)
