"""
Artwork Module.
Handles the catalog of sample designs and the buyer's uploaded image.
Exactly one artwork is active at a time: choosing a sample drops the upload and
a new upload replaces whatever was active before.
"""
import base64
import logging
import mimetypes
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from door_decal.config import SAMPLE_IMAGES
from door_decal.enums import ArtworkSource

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CatalogArtwork:
    """One of the fixed sample designs, identified by its asset name."""
    index: int
    sample_id: str

    @property
    def source(self) -> ArtworkSource:
        return ArtworkSource.CATALOG

    @property
    def label(self) -> str:
        return f"Muestra {self.index + 1}"

@dataclass(frozen=True)
class UploadedArtwork:
    """An uploaded image held in memory as a self-contained data URI."""
    data_uri: str
    filename: str = ""

    @property
    def source(self) -> ArtworkSource:
        return ArtworkSource.UPLOAD

    @property
    def label(self) -> str:
        return self.filename or "Diseño cargado"

ArtworkRef = Union[CatalogArtwork, UploadedArtwork]


def select_sample(index: int, catalog: Sequence[str] = SAMPLE_IMAGES) -> CatalogArtwork:
    """Returns the catalog sample at `index` (0-based)."""
    if not 0 <= index < len(catalog):
        raise IndexError(f"Sample {index} is outside the catalog of {len(catalog)} designs.")
    return CatalogArtwork(index=index, sample_id=catalog[index])


def default_artwork(catalog: Sequence[str] = SAMPLE_IMAGES) -> Optional[ArtworkRef]:
    return select_sample(0, catalog) if catalog else None


def is_active_sample(artwork: Optional[ArtworkRef], index: int) -> bool:
    """True when the catalog entry at `index` is the active design."""
    return isinstance(artwork, CatalogArtwork) and artwork.index == index


def _guess_mime(uploaded_file: Any) -> str:
    mime = getattr(uploaded_file, "type", None)
    if mime:
        return mime
    guessed, _ = mimetypes.guess_type(getattr(uploaded_file, "name", "") or "")
    return guessed or "application/octet-stream"


def to_data_uri(data: bytes, mime: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def read_upload(uploaded_file: Any) -> Optional[UploadedArtwork]:
    """
    Reads an uploaded file into an UploadedArtwork.
    Returns None when there is no file, it is empty, or it cannot be read.
    """
    if uploaded_file is None:
        return None

    name = getattr(uploaded_file, "name", "") or ""
    try:
        if hasattr(uploaded_file, "getvalue"):
            data = uploaded_file.getvalue()
        else:
            data = uploaded_file.read()
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to read uploaded artwork '{name}': {e}")
        return None

    if not data:
        logger.warning(f"Uploaded artwork '{name}' is empty; keeping the current design.")
        return None

    return UploadedArtwork(data_uri=to_data_uri(bytes(data), _guess_mime(uploaded_file)), filename=name)


def apply_upload(current: Optional[ArtworkRef], uploaded_file: Any) -> Optional[ArtworkRef]:
    """The uploaded artwork if it could be read, otherwise `current` unchanged."""
    uploaded = read_upload(uploaded_file)
    return uploaded if uploaded is not None else current
