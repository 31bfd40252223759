"""Test configuration and fixtures for cl_image_convert.

This module provides:
- Pytest configuration (markers, codec checks)
- Function-scoped fixtures generating synthetic images with Pillow
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw, features

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "requires_avif: requires Pillow built with an AVIF codec",
    )


def pytest_runtest_setup(item):
    """Skip codec-dependent tests when the codec is not compiled in."""
    if item.get_closest_marker("requires_avif") and not features.check("avif"):
        pytest.skip("Pillow was built without AVIF support")


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def rgba_image(tmp_path: Path) -> Path:
    """100x50 PNG with a horizontal alpha gradient, named photo.png."""
    output_path = tmp_path / "photo.png"

    img = Image.new("RGBA", (100, 50), color=(200, 40, 40, 255))
    for x in range(100):
        for y in range(50):
            img.putpixel((x, y), (200, 40, 40, int(255 * x / 99)))

    img.save(output_path, "PNG")
    return output_path


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Generate synthetic RGB test image using PIL."""
    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (160, 120), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, 160, 20):
        draw.line([(i, 0), (i, 120)], fill=(255, 255, 255), width=2)
    for i in range(0, 120, 20):
        draw.line([(0, i), (160, i)], fill=(255, 255, 255), width=2)

    draw.ellipse([50, 30, 110, 90], fill=(200, 100, 100))

    img.save(output_path, "JPEG", quality=85)
    return output_path


@pytest.fixture
def grayscale_image(tmp_path: Path) -> Path:
    """32x16 single channel PNG."""
    output_path = tmp_path / "gray.png"
    Image.new("L", (32, 16), color=128).save(output_path, "PNG")
    return output_path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """Zero-byte file with an image extension."""
    output_path = tmp_path / "empty.png"
    output_path.touch()
    return output_path


@pytest.fixture
def corrupt_image(tmp_path: Path) -> Path:
    """File whose content is not any image container."""
    output_path = tmp_path / "corrupt.png"
    _ = output_path.write_bytes(b"this is not an image" * 10)
    return output_path
