# backend/app/core/storage.py
import shutil
import tempfile
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

from fastapi import UploadFile

CHUNK_SIZE = 1024 * 1024


class UploadTooLarge(Exception):
    def __init__(self, max_size: int):
        self.max_size = max_size
        super().__init__(f"Archivo demasiado grande. Máximo: {max_size / (1024 * 1024):.0f}MB")


class StorageManager:

    @staticmethod
    @contextmanager
    def request_workspace(base_dir: Path, prefix: str = "req_") -> Iterator[Path]:
        """
        Directorio exclusivo de una petición. Se elimina al salir, también
        cuando la validación termina con error.
        """
        base_dir.mkdir(parents=True, exist_ok=True)
        workspace = Path(tempfile.mkdtemp(prefix=prefix, dir=base_dir))
        try:
            yield workspace
        finally:
            shutil.rmtree(workspace, ignore_errors=True)

    @staticmethod
    async def save_upload(upload: UploadFile, directory: Path, max_size: int) -> Path:
        """
        Guarda el archivo subido por bloques sin superar max_size.

        El nombre en disco no usa el nombre del cliente, sólo su extensión.
        """
        suffix = Path(upload.filename or "").suffix.lower()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = directory / f"{timestamp}_{str(uuid.uuid4())[:8]}{suffix}"

        written = 0
        with open(file_path, 'wb') as f:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_size:
                    raise UploadTooLarge(max_size)
                f.write(chunk)

        return file_path
