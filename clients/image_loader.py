from io import BytesIO
from pathlib import Path
from typing import Callable

from PIL import Image, UnidentifiedImageError

from data_model import UserProfile
from utils.log import get_logger

logger = get_logger(__name__)

# Reads image bytes for a reference; None means "no usable image"
ImageLoader = Callable[[str], bytes | None]

PLACEHOLDER_SIZE = 100
PLACEHOLDER_COLOR = (200, 200, 200)


def placeholder_image(size: int = PLACEHOLDER_SIZE) -> Image.Image:
    """Plain gray square shown when the profile has no usable image."""
    return Image.new("RGB", (size, size), PLACEHOLDER_COLOR)


class LocalImageLoader:
    """
    Reads profile images from a local directory.

    - References are file names relative to base_dir
    - Missing, empty or unreadable files load as None
    - References that resolve outside base_dir are refused
    """

    def __init__(self, base_dir: str | Path) -> None:
        self.base_dir = Path(base_dir)

    def __call__(self, reference: str) -> bytes | None:
        if not reference:
            return None

        base = self.base_dir.resolve()
        path = (base / reference).resolve()
        if base != path and base not in path.parents:
            logger.warning("Image reference %r is outside %s", reference, base)
            return None

        try:
            data = path.read_bytes()
        except OSError as exc:
            logger.debug("Could not read image %s: %s", path, exc)
            return None
        return data or None


def decode_image(data: bytes) -> Image.Image | None:
    try:
        with Image.open(BytesIO(data)) as img:
            return img.convert("RGB")
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        logger.debug("Image data is not decodable: %s", exc)
        return None


def load_profile_image(profile: UserProfile, loader: ImageLoader) -> Image.Image:
    """Return the profile's image, or the placeholder when it is unavailable."""
    if not profile.image_reference:
        return placeholder_image()

    try:
        data = loader(profile.image_reference)
    except Exception as exc:
        logger.warning("Image loader failed for %r: %s", profile.image_reference, exc)
        data = None

    image = decode_image(data) if data else None
    return image if image is not None else placeholder_image()
