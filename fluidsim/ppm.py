"""Writing captured frames as plain-text (P3) PPM images."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

Pixel = Sequence[float]

_FRAME_DIGITS = 4


def frame_filename(base_name: str, frame: int) -> str:
    """Return ``<base_name>.<frame as four digits>.ppm``.

    Frame numbers must be non-negative and fit in four digits.
    """
    if frame < 0:
        raise ValueError(f"frame number must be non-negative, got {frame}")
    digits = str(frame)
    if len(digits) > _FRAME_DIGITS:
        raise ValueError(f"frame number {frame} has more than {_FRAME_DIGITS} digits")
    return f"{base_name}.{digits.zfill(_FRAME_DIGITS)}.ppm"


def _check_size(pixels: Sequence[Pixel], width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"image size must be non-negative, got {width}x{height}")
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels for a {width}x{height} image, got {len(pixels)}"
        )


def flip_vertical(pixels: Sequence[Pixel], width: int, height: int) -> list[Pixel]:
    """Return the row-major pixels with the order of the rows reversed."""
    _check_size(pixels, width, height)
    rows = [pixels[row * width:(row + 1) * width] for row in range(height)]
    return [pixel for row in reversed(rows) for pixel in row]


def write_ppm(path: str | os.PathLike, pixels: Sequence[Pixel], width: int, height: int) -> None:
    """Write row-major RGB pixels with components in [0, 1] as a P3 image.

    Each component is scaled by 255 and truncated to an integer.
    """
    _check_size(pixels, width, height)
    with open(path, "w", encoding="ascii") as out:
        out.write("P3\n")
        out.write(f"{width} {height}\n255\n")
        for pixel in pixels:
            red, green, blue = (int(255.0 * c) for c in tuple(pixel)[:3])
            out.write(f"{red} {green} {blue}\n")


class ScreenCapture:
    """Counts displayed frames and, while recording, saves each one as a PPM file."""

    def __init__(self, base_name: str, directory: str | os.PathLike = ".") -> None:
        self.base_name = base_name
        self.directory = Path(directory)
        self.frame = 0
        self.recording = False

    def toggle(self) -> bool:
        """Switch recording on or off and return the new state."""
        self.recording = not self.recording
        if self.recording:
            logger.info("Recording to files %s.XXXX.ppm", self.base_name)
        else:
            logger.info("Stopped recording.")
        return self.recording

    def reset(self) -> None:
        """Restart frame numbering."""
        self.frame = 0

    def capture(self, pixels: Sequence[Pixel], width: int, height: int) -> Path | None:
        """Count a frame; when recording, save it and return the file written.

        ``pixels`` are row-major with the bottom row first, as read from a
        framebuffer; the image is flipped so that the top row is written first.
        """
        self.frame += 1
        if not self.recording:
            return None
        path = self.directory / frame_filename(self.base_name, self.frame)
        logger.info("Recording Frame %d", self.frame)
        write_ppm(path, flip_vertical(pixels, width, height), width, height)
        return path