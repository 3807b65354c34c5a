import logging
import time
from pathlib import Path

from fastapi import UploadFile

from app.core.errors import ValidationFailure

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"


def stored_name(filename: str) -> str:
    """``<epoch-millis>-<basename>``; any client-side directory part is dropped."""
    base = Path(filename.replace("\\", "/")).name.strip()
    if not base or base in (".", ".."):
        raise ValidationFailure("Invalid file name")
    return f"{int(time.time() * 1000)}-{base}"


def save_upload(upload: UploadFile, upload_dir: str) -> str:
    """Write the file under ``upload_dir`` and return its public path."""
    if upload is None or not upload.filename:
        raise ValidationFailure("No file uploaded")

    target_dir = Path(upload_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    name = stored_name(upload.filename)

    with open(target_dir / name, "wb") as out:
        while True:
            chunk = upload.file.read(1024 * 1024)
            if not chunk:
                break
            out.write(chunk)

    logger.info("Stored upload %s", name)
    return f"{UPLOAD_URL_PREFIX}/{name}"
