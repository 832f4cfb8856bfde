import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import wallpaper_layout
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from wallpaper_layout.core.models import CanvasBounds, ImageDescriptor
from wallpaper_layout.layout.config import LayoutConfig


# Common test fixtures
@pytest.fixture
def make_image():
    """Factory for ImageDescriptors with sequential default ids."""
    counter = {"n": 0}

    def _create(width: float, height: float, image_id=None):
        counter["n"] += 1
        return ImageDescriptor(
            image_id=image_id if image_id is not None else f"img{counter['n']}",
            width=width,
            height=height,
        )
    return _create


@pytest.fixture
def default_config():
    """Wallpaper creator defaults: spacing 10, margin 20, min size 100."""
    return LayoutConfig()


@pytest.fixture
def fhd_canvas():
    """1920x1080 canvas."""
    return CanvasBounds(1920, 1080)


@pytest.fixture
def mixed_images(make_image):
    """Images spanning every ratio category plus both fallbacks."""
    return [
        make_image(1000, 1000),   # square
        make_image(900, 1200),    # portrait
        make_image(1400, 1050),   # landscape
        make_image(1920, 1080),   # wide
        make_image(2400, 1000),   # panoramic
        make_image(3500, 1000),   # ultra-wide
        make_image(6000, 1000),   # fallback landscape
        make_image(300, 1000),    # fallback portrait
        make_image(640, 480),     # landscape
        make_image(1080, 1920),   # fallback portrait (0.5625)
    ]


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
