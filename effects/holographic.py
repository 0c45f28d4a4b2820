"""
Holoshift — Holographic Effect
Cool-tone color remap, scanline modulation, and edge glow.
"""

import numpy as np

# --- Configurable Defaults ---
RED_SCALE = 0.6            # Red suppression
COOL_BOOST = 1.3           # Green/blue boost
BLUE_BOOST = 1.2           # Extra blue on top of COOL_BOOST
SCANLINE_BASE = 0.95
SCANLINE_DEPTH = 0.05      # +/- 5% brightness swing
SCANLINE_PERIOD = 2.0      # sin(y / period)
EDGE_THRESHOLD = 30.0
GLOW = (40, 80, 120)       # R, G, B added at edges
GLOW_MODES = ("snapshot", "inplace")

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def clamp_channel(values):
    """Clamp a scalar or array into the 0-255 channel range."""
    return np.clip(values, 0, 255)


def to_uint8(values) -> np.ndarray:
    """Clamp, then truncate toward zero into uint8."""
    return clamp_channel(values).astype(np.uint8)


def grayscale(rgb: np.ndarray) -> np.ndarray:
    """Integer luminance of the trailing RGB axis (truncated, not rounded)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    gray = wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]
    return np.floor(gray).astype(np.int64)


def scanline_factor(rows, base: float = SCANLINE_BASE, depth: float = SCANLINE_DEPTH,
                    period: float = SCANLINE_PERIOD):
    """Brightness multiplier for each row index: base + depth * sin(y / period)."""
    return base + depth * np.sin(np.asarray(rows, dtype=np.float64) / period)


def to_8bit(frame: np.ndarray) -> np.ndarray:
    """Bring a uint8 or uint16 frame onto the 8-bit scale."""
    if frame.dtype == np.uint8:
        return frame
    if frame.dtype == np.uint16:
        return (frame >> 8).astype(np.uint8)
    raise ValueError(f"Unsupported pixel dtype: {frame.dtype}. Expected uint8 or uint16.")


def _check_rgba(frame: np.ndarray):
    if not isinstance(frame, np.ndarray) or frame.ndim != 3 or frame.shape[2] != 4:
        shape = getattr(frame, "shape", None)
        raise ValueError(f"Expected (H, W, 4) RGBA array, got shape {shape}")


def color_remap(frame: np.ndarray, red_scale: float = RED_SCALE,
                cool_boost: float = COOL_BOOST, blue_boost: float = BLUE_BOOST,
                scanline_base: float = SCANLINE_BASE,
                scanline_depth: float = SCANLINE_DEPTH,
                scanline_period: float = SCANLINE_PERIOD) -> np.ndarray:
    """Shift colors toward cyan/blue and modulate brightness per row.

    Args:
        frame: (H, W, 4) uint8 or uint16 RGBA array. Not modified.
        red_scale: Multiplier for red.
        cool_boost: Multiplier for green and blue.
        blue_boost: Extra multiplier for blue (applied after cool_boost).
        scanline_base: Scanline factor midpoint.
        scanline_depth: Scanline factor amplitude.
        scanline_period: Row divisor inside the sine.

    Returns:
        New (H, W, 4) uint8 array. Alpha is copied through.
    """
    _check_rgba(frame)
    src = to_8bit(frame)
    h = src.shape[0]

    rgb = src[:, :, :3].astype(np.float64)
    factor = scanline_factor(np.arange(h), scanline_base, scanline_depth,
                             scanline_period)[:, np.newaxis]

    # Clamp only once, after the scanline multiply
    out = np.empty(src.shape, dtype=np.uint8)
    out[:, :, 0] = to_uint8(rgb[:, :, 0] * red_scale * factor)
    out[:, :, 1] = to_uint8(rgb[:, :, 1] * cool_boost * factor)
    out[:, :, 2] = to_uint8(rgb[:, :, 2] * cool_boost * blue_boost * factor)
    out[:, :, 3] = src[:, :, 3]
    return out


def _edge_mask(gray: np.ndarray, threshold: float) -> np.ndarray:
    """Boolean mask over interior pixels where the gradient exceeds threshold."""
    gx = gray[1:-1, 2:] - gray[1:-1, :-2]
    gy = gray[2:, 1:-1] - gray[:-2, 1:-1]
    edge = np.sqrt((gx * gx + gy * gy).astype(np.float64))
    return edge > threshold


def _glow_inplace(buffer: np.ndarray, threshold: float, glow: np.ndarray):
    """Row-major scan where brightened pixels feed later neighbors' gradients."""
    h, w = buffer.shape[:2]
    gray = grayscale(buffer[:, :, :3])
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            gx = gray[y, x + 1] - gray[y, x - 1]
            gy = gray[y + 1, x] - gray[y - 1, x]
            if np.sqrt(float(gx * gx + gy * gy)) > threshold:
                buffer[y, x, :3] = to_uint8(buffer[y, x, :3].astype(np.int64) + glow)
                gray[y, x] = grayscale(buffer[y, x, :3])


def edge_glow(buffer: np.ndarray, edge_threshold: float = EDGE_THRESHOLD,
              glow: tuple = GLOW, glow_mode: str = "snapshot") -> np.ndarray:
    """Brighten interior pixels that sit on a luminance edge, in place.

    Gradients use the four direct neighbors. The one-pixel border is never
    touched, so frames narrower or shorter than 3 pixels pass through unchanged.

    Args:
        buffer: (H, W, 4) uint8 RGBA array. Mutated.
        edge_threshold: Minimum gradient magnitude (exclusive) to glow.
        glow: (R, G, B) offsets added at edge pixels. Fractional values are
            rounded to the nearest integer (half to even).
        glow_mode: 'snapshot' reads every gradient from the pre-pass state.
            'inplace' scans row-major and lets already-glowed pixels affect
            the pixels after them.

    Returns:
        The same buffer.
    """
    _check_rgba(buffer)
    if buffer.dtype != np.uint8:
        raise ValueError(f"Glow buffer must be uint8, got {buffer.dtype}")
    if glow_mode not in GLOW_MODES:
        raise ValueError(f"Unknown glow_mode: {glow_mode}. Available: {', '.join(GLOW_MODES)}")

    glow = np.rint(np.asarray(glow, dtype=np.float64)).astype(np.int64).reshape(3)
    threshold = float(edge_threshold)
    h, w = buffer.shape[:2]
    if h < 3 or w < 3:
        return buffer

    if glow_mode == "inplace":
        _glow_inplace(buffer, threshold, glow)
        return buffer

    mask = _edge_mask(grayscale(buffer[:, :, :3]), threshold)
    interior = buffer[1:-1, 1:-1, :3]
    boosted = to_uint8(interior.astype(np.int64) + glow)
    interior[mask] = boosted[mask]
    return buffer


def holographic(frame: np.ndarray, red_scale: float = RED_SCALE,
                cool_boost: float = COOL_BOOST, blue_boost: float = BLUE_BOOST,
                scanline_base: float = SCANLINE_BASE,
                scanline_depth: float = SCANLINE_DEPTH,
                scanline_period: float = SCANLINE_PERIOD,
                edge_threshold: float = EDGE_THRESHOLD, glow: tuple = GLOW,
                glow_mode: str = "snapshot") -> np.ndarray:
    """Futuristic hologram look: cool tones, scanlines, glowing edges.

    Args:
        frame: (H, W, 4) uint8 or uint16 RGBA array. Not modified.

    Returns:
        New (H, W, 4) uint8 RGBA array.
    """
    out = color_remap(frame, red_scale=red_scale, cool_boost=cool_boost,
                      blue_boost=blue_boost, scanline_base=scanline_base,
                      scanline_depth=scanline_depth,
                      scanline_period=scanline_period)
    return edge_glow(out, edge_threshold=edge_threshold, glow=glow,
                     glow_mode=glow_mode)
