"""
Holoshift — Image I/O
Decodes images into RGBA numpy arrays and encodes results back to disk.
OpenCV reads (keeps 16-bit depth), Pillow writes.
"""

import logging
from pathlib import Path

import cv2
import numpy as np
from PIL import Image

from core.safety import check_dimensions

logger = logging.getLogger(__name__)

# Formats Pillow can't store with an alpha channel
_NO_ALPHA_EXTENSIONS = {".jpg", ".jpeg", ".bmp"}


def load_image(path) -> np.ndarray:
    """Read an image as (H, W, 4) RGBA at its native bit depth (uint8 or uint16).

    Raises:
        ValueError: If the file can't be decoded.
        SafetyError: If the image exceeds the pixel limit.
    """
    path = str(path)
    data = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if data is None:
        raise ValueError(f"Could not decode image: {path}")

    if data.dtype not in (np.uint8, np.uint16):
        raise ValueError(f"Unsupported pixel depth {data.dtype} in {path}")

    check_dimensions(data.shape[1], data.shape[0])

    if data.ndim == 2:
        rgba = cv2.cvtColor(data, cv2.COLOR_GRAY2RGBA)
    elif data.shape[2] == 3:
        rgba = cv2.cvtColor(data, cv2.COLOR_BGR2RGBA)
    elif data.shape[2] == 4:
        rgba = cv2.cvtColor(data, cv2.COLOR_BGRA2RGBA)
    else:
        raise ValueError(f"Unsupported channel count {data.shape[2]} in {path}")

    logger.debug("Loaded %s: %dx%d %s", path, rgba.shape[1], rgba.shape[0], rgba.dtype)
    return rgba


def save_image(frame: np.ndarray, path) -> Path:
    """Write an (H, W, 4) uint8 RGBA frame. Alpha is dropped for JPEG/BMP.

    Returns:
        Path of the written file.
    """
    path = Path(path)
    if frame.ndim != 3 or frame.shape[2] != 4 or frame.dtype != np.uint8:
        raise ValueError(f"Expected (H, W, 4) uint8 frame, got {frame.shape} {frame.dtype}")
    if frame.shape[0] == 0 or frame.shape[1] == 0:
        raise ValueError("Cannot encode an empty image")

    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.fromarray(frame)
    if path.suffix.lower() in _NO_ALPHA_EXTENSIONS:
        img = img.convert("RGB")
    img.save(path)
    logger.debug("Saved %s", path)
    return path
