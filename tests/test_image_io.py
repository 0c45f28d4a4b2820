"""
Holoshift — Image I/O Tests
Decode/encode through OpenCV and Pillow.

Run with: pytest tests/test_image_io.py -v
"""

import os
import sys

import cv2
import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.image_io import load_image, save_image
from core.safety import SafetyError


class TestSaveLoad:

    def test_png_keeps_rgba(self, tmp_path, random_frame):
        path = save_image(random_frame, tmp_path / "out.png")
        loaded = load_image(path)
        assert loaded.dtype == np.uint8
        np.testing.assert_array_equal(loaded, random_frame)

    def test_jpeg_drops_alpha(self, tmp_path, gradient_frame):
        frame = gradient_frame.copy()
        frame[:, :, 3] = 10
        path = save_image(frame, tmp_path / "out.jpg")
        loaded = load_image(path)
        assert loaded.shape == frame.shape
        assert (loaded[:, :, 3] == 255).all()

    def test_creates_parent_dir(self, tmp_path, gradient_frame):
        path = save_image(gradient_frame, tmp_path / "a" / "b" / "out.png")
        assert path.exists()

    def test_rejects_empty(self, tmp_path):
        with pytest.raises(ValueError, match="empty"):
            save_image(np.zeros((0, 0, 4), dtype=np.uint8), tmp_path / "out.png")

    def test_rejects_rgb(self, tmp_path):
        with pytest.raises(ValueError):
            save_image(np.zeros((4, 4, 3), dtype=np.uint8), tmp_path / "out.png")


class TestLoad:

    def test_bgr_converted_to_rgb(self, tmp_path):
        bgr = np.zeros((4, 6, 3), dtype=np.uint8)
        bgr[:, :, 0] = 200  # blue in OpenCV order
        path = str(tmp_path / "blue.png")
        assert cv2.imwrite(path, bgr)
        loaded = load_image(path)
        assert loaded.shape == (4, 6, 4)
        assert (loaded[:, :, 2] == 200).all()
        assert (loaded[:, :, 0] == 0).all()
        assert (loaded[:, :, 3] == 255).all()

    def test_sixteen_bit_kept(self, tmp_path):
        bgr = np.zeros((3, 3, 3), dtype=np.uint16)
        bgr[:, :, 2] = 40000  # red
        path = str(tmp_path / "deep.png")
        assert cv2.imwrite(path, bgr)
        loaded = load_image(path)
        assert loaded.dtype == np.uint16
        assert (loaded[:, :, 0] == 40000).all()
        assert (loaded[:, :, 3] == 65535).all()

    def test_grayscale_file(self, tmp_path):
        gray = np.full((5, 5), 77, dtype=np.uint8)
        path = str(tmp_path / "gray.png")
        assert cv2.imwrite(path, gray)
        loaded = load_image(path)
        assert loaded.shape == (5, 5, 4)
        assert (loaded[:, :, :3] == 77).all()

    def test_garbage_file(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image at all")
        with pytest.raises(ValueError, match="decode"):
            load_image(path)

    def test_pixel_limit(self, tmp_path, gradient_frame, monkeypatch):
        path = save_image(gradient_frame, tmp_path / "big.png")
        monkeypatch.setattr("core.safety.MAX_PIXELS", 100)
        with pytest.raises(SafetyError):
            load_image(path)
