"""
Holoshift — Safety & Resource Guards
Centralized preflight checks run before any file processing.
Prevents oversized inputs, unsupported formats, and accidental overwrites.
"""

import os
from pathlib import Path

# --- Configurable Limits ---
MAX_FILE_MB = 200           # Maximum input file size
MAX_PIXELS = 100_000_000    # Maximum decoded width * height
INPUT_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".webp"}
OUTPUT_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".webp"}


class SafetyError(Exception):
    """Raised when a preflight check fails."""
    pass


def preflight(input_path: str, output_path: str | None = None, force: bool = False) -> dict:
    """Run all safety checks before processing a file.

    Args:
        input_path: Path to the input image.
        output_path: Where the result will be written (optional).
        force: Allow overwriting an existing output file.

    Returns:
        dict with file metadata (path, size_mb, extension).

    Raises:
        SafetyError: If any check fails.
        FileNotFoundError: If input doesn't exist.
    """
    input_path = str(input_path)
    real_path = os.path.realpath(input_path)

    # 1. File exists
    if not os.path.isfile(real_path):
        raise FileNotFoundError(f"Input file not found: {input_path}")

    # 2. File size check
    size_bytes = os.path.getsize(real_path)
    size_mb = size_bytes / (1024 * 1024)
    if size_mb > MAX_FILE_MB:
        raise SafetyError(
            f"Input file is {size_mb:.0f}MB, exceeds {MAX_FILE_MB}MB limit."
        )

    # 3. File extension check
    ext = Path(real_path).suffix.lower()
    if ext not in INPUT_EXTENSIONS:
        raise SafetyError(
            f"File type '{ext}' not allowed. "
            f"Supported: {', '.join(sorted(INPUT_EXTENSIONS))}"
        )

    # 4. Output checks
    if output_path is not None:
        out_real = os.path.realpath(str(output_path))
        out_ext = Path(out_real).suffix.lower()
        if out_ext not in OUTPUT_EXTENSIONS:
            raise SafetyError(
                f"Output type '{out_ext}' not allowed. "
                f"Supported: {', '.join(sorted(OUTPUT_EXTENSIONS))}"
            )
        if out_real == real_path:
            raise SafetyError("Output path is the same as the input path.")
        if os.path.exists(out_real) and not force:
            raise SafetyError(f"Output already exists: {output_path}. Use --force to overwrite.")

    return {
        "path": real_path,
        "size_mb": size_mb,
        "extension": ext,
    }


def check_dimensions(width: int, height: int) -> None:
    """Reject decoded images too large to hold in memory comfortably.

    Raises:
        SafetyError: If width * height exceeds MAX_PIXELS.
    """
    pixels = int(width) * int(height)
    if pixels > MAX_PIXELS:
        raise SafetyError(
            f"Image is {width}x{height} ({pixels:,} pixels), max is {MAX_PIXELS:,}."
        )
