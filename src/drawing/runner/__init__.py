from .config import GalleryConfig
from .main import build_gallery, write_gallery, main


__all__ = [
    "GalleryConfig",
    "build_gallery",
    "write_gallery",
    "main",
]
