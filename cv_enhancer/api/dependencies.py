from fastapi import Depends

from cv_enhancer.config import Settings, get_settings
from cv_enhancer.core.upload_store import LocalUploadStore


def get_upload_store(settings: Settings = Depends(get_settings)) -> LocalUploadStore:
    return LocalUploadStore(settings.upload_dir, max_bytes=settings.max_upload_bytes)
