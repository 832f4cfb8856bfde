"""
Module: images.provider

Purpose:
    Read intrinsic image sizes from files and wrap them as descriptors.
    Only the image header is read; pixel data is never decoded here.

Key Functions:
    - describe_image_file(): Descriptor for one file
    - describe_images(): Descriptors for many files, ids assigned in order
    - find_image_files(): Supported image files in a directory

Dependencies:
    - PIL: Image header parsing

Used By:
    - scripts.preview_layout: CLI input
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Hashable, Iterable, List, Optional

from PIL import Image, UnidentifiedImageError

from wallpaper_layout.core.models import ImageDescriptor

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".tif", ".tiff"})


class ImageNotFoundError(Exception):
    """Image file missing or unreadable."""
    pass


def describe_image_file(path: Path, image_id: Optional[Hashable] = None) -> ImageDescriptor:
    """
    Create a descriptor from an image file.

    Args:
        path: Image file path
        image_id: Identifier to use (default: file stem)

    Returns:
        ImageDescriptor with the file's pixel size

    Raises:
        ImageNotFoundError: If the file is missing or not an image
    """
    path = Path(path)
    if not path.is_file():
        raise ImageNotFoundError(f"Image not found: {path}")
    try:
        with Image.open(path) as img:
            width, height = img.size
    except (UnidentifiedImageError, OSError) as e:
        raise ImageNotFoundError(f"Could not read image {path}: {e}") from e

    return ImageDescriptor(
        image_id=image_id if image_id is not None else path.stem,
        width=width,
        height=height,
        name=path.name,
    )


def describe_images(paths: Iterable[Path]) -> List[ImageDescriptor]:
    """
    Create descriptors for several files.

    Ids are the file stems; a stem already issued gets the first free
    numeric suffix (``photo-2``, ``photo-3``, ...) so ids stay unique even
    when a file is itself named like a suffixed stem.
    """
    descriptors: List[ImageDescriptor] = []
    issued: set[str] = set()
    for path in paths:
        path = Path(path)
        image_id = path.stem
        suffix = 2
        while image_id in issued:
            image_id = f"{path.stem}-{suffix}"
            suffix += 1
        issued.add(image_id)
        descriptors.append(describe_image_file(path, image_id=image_id))
    logger.debug(f"Described {len(descriptors)} images")
    return descriptors


def find_image_files(directory: Path) -> List[Path]:
    """Supported image files directly inside directory, sorted by name."""
    directory = Path(directory)
    if not directory.is_dir():
        raise ImageNotFoundError(f"Not a directory: {directory}")
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES
    )
