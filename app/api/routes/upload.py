from fastapi import APIRouter, Depends, File, UploadFile

from app.api.deps import get_settings
from app.core.auth import get_current_user, User
from app.core.config import Settings
from app.services.uploads import save_upload

router = APIRouter(tags=["upload"])


@router.post("/upload")
def upload_file(
    file: UploadFile = File(None),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """Store a receipt or contract document; returns the path to reference it by."""
    return {"path": save_upload(file, settings.UPLOAD_DIR)}
