"""
Module: images

Purpose:
    Build ImageDescriptors from image files on disk.
"""

from .provider import (
    SUPPORTED_SUFFIXES,
    ImageNotFoundError,
    describe_image_file,
    describe_images,
    find_image_files,
)

__all__ = [
    "SUPPORTED_SUFFIXES",
    "ImageNotFoundError",
    "describe_image_file",
    "describe_images",
    "find_image_files",
]
