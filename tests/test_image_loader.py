from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from clients.image_loader import (
    PLACEHOLDER_COLOR,
    LocalImageLoader,
    load_profile_image,
    placeholder_image,
)
from data_model import UserProfile


def _png_bytes(color=(255, 0, 0)) -> bytes:
    buf = BytesIO()
    Image.new("RGB", (4, 4), color).save(buf, format="PNG")
    return buf.getvalue()


def _is_placeholder(img: Image.Image) -> bool:
    return img.size == placeholder_image().size and img.getpixel((0, 0)) == PLACEHOLDER_COLOR


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    (tmp_path / "jane.png").write_bytes(_png_bytes())
    (tmp_path / "empty.png").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("not an image", encoding="utf-8")
    return tmp_path


def test_local_loader_reads_existing_file(image_dir: Path) -> None:
    loader = LocalImageLoader(image_dir)

    assert loader("jane.png") == (image_dir / "jane.png").read_bytes()


@pytest.mark.parametrize("reference", ["missing.png", "empty.png", "", "../outside.png"])
def test_local_loader_returns_none_for_unusable_references(image_dir: Path, reference: str) -> None:
    (image_dir.parent / "outside.png").write_bytes(_png_bytes())

    assert LocalImageLoader(image_dir)(reference) is None


def test_profile_image_loads_real_image(image_dir: Path) -> None:
    img = load_profile_image(UserProfile(name="Jane", image_reference="jane.png"), LocalImageLoader(image_dir))

    assert img.size == (4, 4)
    assert img.getpixel((0, 0)) == (255, 0, 0)


@pytest.mark.parametrize("reference", [None, "missing.png", "notes.txt"])
def test_profile_image_falls_back_to_placeholder(image_dir: Path, reference) -> None:
    img = load_profile_image(UserProfile(name="Jane", image_reference=reference), LocalImageLoader(image_dir))

    assert _is_placeholder(img)


def test_injected_loader_is_used_without_files() -> None:
    calls = []

    def loader(reference: str):
        calls.append(reference)
        return _png_bytes((0, 0, 255))

    img = load_profile_image(UserProfile(image_reference="any-ref"), loader)

    assert calls == ["any-ref"]
    assert img.getpixel((0, 0)) == (0, 0, 255)


def test_failing_loader_falls_back_to_placeholder() -> None:
    def loader(reference: str):
        raise RuntimeError("storage offline")

    assert _is_placeholder(load_profile_image(UserProfile(image_reference="x"), loader))
