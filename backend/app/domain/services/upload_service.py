"""
Stockage local des images envoyées depuis l'administration.
"""
import logging
import random
import string
import time
from pathlib import Path
from typing import Tuple

from fastapi import UploadFile

logger = logging.getLogger(__name__)

# Extension -> type de contenu servi
ALLOWED_IMAGE_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


class FileTooLargeError(ValueError):
    pass


class InvalidFileTypeError(ValueError):
    pass


class ForbiddenPathError(Exception):
    pass


class UploadService:

    def __init__(self, uploads_dir: str, max_size: int, chunk_size: int = 64 * 1024):
        self.uploads_dir = Path(uploads_dir)
        self.max_size = max_size
        self.chunk_size = chunk_size

    def _root(self) -> Path:
        return self.uploads_dir.resolve()

    def generate_filename(self, extension: str) -> str:
        suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=6))
        return f"{int(time.time() * 1000)}-{suffix}{extension}"

    async def read_limited(self, file: UploadFile) -> bytes:
        """Lit le corps par blocs et s'arrête dès que la limite est dépassée."""
        chunks = []
        total = 0
        while True:
            chunk = await file.read(self.chunk_size)
            if not chunk:
                break
            total += len(chunk)
            if total > self.max_size:
                logger.warning(f"Fichier trop volumineux: {file.filename} (> {self.max_size} octets)")
                raise FileTooLargeError("File size limit exceeded")
            chunks.append(chunk)
        return b"".join(chunks)

    def save_image(self, original_name: str, content: bytes) -> str:
        """Valide puis écrit le fichier ; retourne le nom généré."""
        if len(content) > self.max_size:
            logger.warning(f"Fichier trop volumineux: {original_name} ({len(content)} octets)")
            raise FileTooLargeError("File size limit exceeded")

        extension = Path(original_name or "").suffix.lower()
        if extension not in ALLOWED_IMAGE_TYPES:
            logger.warning(f"Type de fichier refuse: {original_name}")
            raise InvalidFileTypeError("Invalid file type. Only images are allowed.")

        root = self._root()
        root.mkdir(parents=True, exist_ok=True)
        filename = self.generate_filename(extension)
        (root / filename).write_bytes(content)
        logger.info(f"Image enregistree: {filename} ({len(content)} octets)")
        return filename

    def resolve(self, filename: str) -> Tuple[Path, str]:
        """
        Chemin réel d'un fichier servi et son type de contenu.
        Lève ForbiddenPathError si le chemin sort du dossier, FileNotFoundError s'il n'existe pas.
        """
        root = self._root()
        path = (root / filename).resolve()
        if path != root and root not in path.parents:
            logger.warning(f"Acces refuse hors du dossier d'upload: {filename}")
            raise ForbiddenPathError(filename)
        if not path.is_file():
            raise FileNotFoundError(filename)

        content_type = ALLOWED_IMAGE_TYPES.get(path.suffix.lower(), "application/octet-stream")
        return path, content_type
