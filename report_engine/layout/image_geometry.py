"""
Cover Page Geometry.

Turns an image's pixel size into the cover page size. The image is always
shown at the configured display width; its height follows the aspect ratio.
"""
import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from ..errors import UnreadableImage
from .config import LayoutConfig, DEFAULT_LAYOUT

logger = logging.getLogger("ReportEngine.ImageGeometry")

CM_PER_INCH = 2.54


@dataclass(frozen=True)
class CoverGeometry:
    """Displayed image size and the page wrapped around it (cm)."""
    image_width: float
    image_height: float
    page_width: float
    page_height: float
    margin: float


def read_image_size(data: bytes) -> Tuple[int, int]:
    """Return (width, height) in pixels.

    Raises:
        UnreadableImage: if the bytes are not a decodable image, are
            truncated, exceed Pillow's pixel limit or report an empty
            dimension.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            width, height = img.size
        # verify() leaves the image unusable, so it gets its own handle
        with Image.open(BytesIO(data)) as img:
            img.verify()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
        SyntaxError,
        EOFError,
    ) as exc:
        raise UnreadableImage(f"Could not identify image: {exc}") from exc

    if width <= 0 or height <= 0:
        raise UnreadableImage(f"Image has invalid dimensions {width}x{height}")

    logger.debug("Image identified: %dx%d px", width, height)
    return width, height


def calculate_cover_geometry(
    pixel_width: int,
    pixel_height: int,
    config: Optional[LayoutConfig] = None,
) -> CoverGeometry:
    """Compute displayed image size and cover page size.

    Args:
        pixel_width: Image width in pixels
        pixel_height: Image height in pixels
        config: Layout constants

    Returns:
        CoverGeometry with the page never smaller than the configured minimum.
    """
    config = config or DEFAULT_LAYOUT

    original_width = pixel_width / config.dpi * CM_PER_INCH
    original_height = pixel_height / config.dpi * CM_PER_INCH
    aspect_ratio = original_height / original_width

    image_width = config.target_image_width
    image_height = image_width * aspect_ratio
    margin = config.image_margin

    page_width = max(config.min_image_page_width, image_width + 2 * margin)
    page_height = max(
        config.min_image_page_height,
        image_height + 2 * margin + config.header_footer_allowance,
    )

    return CoverGeometry(
        image_width=image_width,
        image_height=image_height,
        page_width=page_width,
        page_height=page_height,
        margin=margin,
    )
