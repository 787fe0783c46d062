"""Image decoding and encoding at the edges of the plot pipeline."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image
from tqdm import tqdm

from image_plot.errors import EncodeError, ImageLoadError
from image_plot.logging_utils import logger
from image_plot.render.canvas import to_rgb

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


@dataclass(frozen=True)
class ImageRef:
    """A decoded RGB raster and the file it came from."""

    path: Path
    image: Image.Image

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self.image.width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.image.size


def load_image(path: Path | str) -> ImageRef:
    """
    Load an image from a file path and convert to RGB.

    Pixel data is read eagerly so the file handle is released before
    returning.

    Raises:
        ImageLoadError: If the file is missing, unreadable, or not an image.

    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            rgb = to_rgb(img)
            if rgb is img:
                rgb = img.copy()
    except FileNotFoundError as e:
        raise ImageLoadError(path, "file not found") from e
    except OSError as e:
        raise ImageLoadError(path, str(e)) from e
    if rgb.width <= 0 or rgb.height <= 0:
        raise ImageLoadError(path, "image has no pixels")
    return ImageRef(path=path, image=rgb)


def load_images(
    paths: Sequence[Path | str],
    *,
    max_workers: int | None = None,
    progress: bool = False,
) -> list[ImageRef]:
    """
    Decode ``paths`` concurrently, returning images in input order.

    Decoding is independent per file, so a thread pool is used when more
    than one path is given. The first failure in input order is raised.
    """
    if len(paths) == 1:
        return [load_image(paths[0])]

    bar = tqdm(total=len(paths), desc="Loading images", disable=not progress)
    try:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(load_image, p) for p in paths]
            refs: list[ImageRef] = []
            for future in futures:
                refs.append(future.result())
                bar.update(1)
    finally:
        bar.close()
    logger.info("Loaded %d images", len(refs))
    return refs


def save_image(image: Image.Image, path: Path | str) -> Path:
    """
    Encode ``image`` to ``path``, choosing the format from the extension.

    Parent directories are created as needed.

    Raises:
        EncodeError: If the directory or file cannot be written or the
            extension does not name a known format.

    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(path, str(e)) from e
    return path
