"""
Holoshift — Effects Registry
Provides a uniform interface to the effect kernel.
Every effect is a function: (frame: np.ndarray, **params) -> np.ndarray
"""

import numpy as np

from effects.holographic import (
    holographic,
    RED_SCALE,
    COOL_BOOST,
    BLUE_BOOST,
    SCANLINE_BASE,
    SCANLINE_DEPTH,
    SCANLINE_PERIOD,
    EDGE_THRESHOLD,
    GLOW,
)

# Master registry: name -> (function, default_params, description)
EFFECTS = {
    "holographic": {
        "fn": holographic,
        "category": "color",
        "params": {
            "red_scale": RED_SCALE,
            "cool_boost": COOL_BOOST,
            "blue_boost": BLUE_BOOST,
            "scanline_base": SCANLINE_BASE,
            "scanline_depth": SCANLINE_DEPTH,
            "scanline_period": SCANLINE_PERIOD,
            "edge_threshold": EDGE_THRESHOLD,
            "glow": GLOW,
            "glow_mode": "snapshot",
        },
        "description": "Cool-tone hologram with scanlines and glowing edges",
    },
}

CATEGORIES = {
    "color": "COLOR",
}


def get_effect(name: str):
    """Get an effect by name. Returns (fn, default_params).

    Raises ValueError if effect doesn't exist.
    """
    if name not in EFFECTS:
        available = ", ".join(sorted(EFFECTS.keys()))
        raise ValueError(f"Unknown effect: {name}. Available: {available}")
    entry = EFFECTS[name]
    return entry["fn"], entry["params"].copy()


def list_effects(category: str = None) -> list[dict]:
    """List all available effects with descriptions.

    Args:
        category: Optional filter — only return effects in this category.
    """
    results = []
    for name, entry in EFFECTS.items():
        if category and entry.get("category") != category:
            continue
        results.append({
            "name": name,
            "description": entry["description"],
            "params": entry["params"],
            "category": entry.get("category", "other"),
        })
    return results


def normalize_frame(frame) -> np.ndarray:
    """Bring any grayscale/RGB/RGBA frame to (H, W, 4) at its native depth.

    Missing alpha is filled with the dtype's maximum (fully opaque).
    """
    frame = np.asarray(frame)
    if frame.dtype not in (np.uint8, np.uint16):
        raise ValueError(f"Unsupported pixel dtype: {frame.dtype}. Expected uint8 or uint16.")
    if frame.ndim == 2:
        frame = np.stack([frame] * 3, axis=2)
    if frame.ndim != 3 or frame.shape[2] not in (3, 4):
        raise ValueError(f"Expected (H, W), (H, W, 3) or (H, W, 4) frame, got shape {frame.shape}")
    if frame.shape[2] == 3:
        opaque = np.full(frame.shape[:2] + (1,), np.iinfo(frame.dtype).max, dtype=frame.dtype)
        frame = np.concatenate([frame, opaque], axis=2)
    return frame


def apply_effect(frame, effect_name: str = "holographic", **params):
    """Apply a named effect to a frame with given params.

    The frame may be grayscale, RGB or RGBA at 8 or 16 bits per channel.
    Output is always (H, W, 4) uint8 RGBA.
    """
    fn, defaults = get_effect(effect_name)
    unknown = sorted(set(params) - set(defaults))
    if unknown:
        raise ValueError(
            f"Unknown param(s) for {effect_name}: {', '.join(unknown)}. "
            f"Available: {', '.join(defaults)}"
        )
    merged = {**defaults, **params}
    return fn(normalize_frame(frame), **merged)
