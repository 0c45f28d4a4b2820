#!/usr/bin/env python3
"""
Holoshift — Hologram Image Effect
CLI entry point. Also importable as a library.

Usage:
    python holoshift.py apply photo.png holo.png
    python holoshift.py apply photo.png holo.png --params edge_threshold=20 glow=(20,60,100)
    python holoshift.py apply photo.png holo.png --glow-mode inplace --force
    python holoshift.py list-effects
    python holoshift.py info holographic
"""

import sys
import os
import time
import logging
import argparse

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.image_io import load_image, save_image
from core.safety import preflight, SafetyError
from effects import apply_effect, list_effects, EFFECTS, CATEGORIES
from effects.holographic import GLOW_MODES

__version__ = "0.1.0"

logger = logging.getLogger("holoshift")


def _parse_param_value(val: str):
    """Safely parse a CLI parameter value (number, tuple, or string)."""
    # Tuple: "(40, 80, 120)" → (40.0, 80.0, 120.0)
    if val.startswith('(') and val.endswith(')'):
        parts = val.strip('()').split(',')
        if len(parts) > 10:
            raise ValueError(f"Tuple too long (max 10 elements): {val}")
        parsed = []
        for p in parts:
            p = p.strip()
            if not p:
                raise ValueError(f"Empty tuple element in: {val}")
            f = float(p)
            if f != f or f == float('inf') or f == float('-inf'):
                raise ValueError(f"NaN/Inf not allowed: {val}")
            parsed.append(f)
        return tuple(parsed)

    # Reject NaN/Inf as standalone strings
    if val.lower().strip() in ('nan', 'inf', '-inf', '+inf', 'infinity', '-infinity'):
        raise ValueError(f"NaN/Inf not allowed: {val}")

    # Catches spellings the list misses ("-nan", "1e999")
    try:
        f = float(val)
    except ValueError:
        f = None
    if f is not None and (f != f or f == float('inf') or f == float('-inf')):
        raise ValueError(f"NaN/Inf not allowed: {val}")

    # Float
    if '.' in val or 'e' in val.lower():
        try:
            return float(val)
        except ValueError:
            return val  # e.g. "inplace"

    # Integer
    try:
        return int(val)
    except (ValueError, TypeError):
        return val  # Keep as string


def _parse_params(pairs) -> dict:
    params = {}
    for p in pairs or []:
        if "=" not in p:
            raise ValueError(f"Param must be key=value, got: {p}")
        key, val = p.split("=", 1)
        params[key.strip()] = _parse_param_value(val.strip())
    return params


def cmd_apply(args):
    """Run the hologram effect on one image."""
    info = preflight(args.input, args.output, force=args.force)
    logger.debug("Input validated: %.1fMB %s", info["size_mb"], info["extension"])

    params = _parse_params(args.params)
    if args.glow_mode:
        params["glow_mode"] = args.glow_mode

    frame = load_image(args.input)
    h, w = frame.shape[:2]

    start = time.perf_counter()
    result = apply_effect(frame, args.effect, **params)
    logger.debug("Effect %s on %dx%d took %.3fs", args.effect, w, h,
                 time.perf_counter() - start)

    out = save_image(result, args.output)
    print(f"Wrote {out} ({w}x{h})")


def cmd_list_effects(args):
    """List all available effects, grouped by category."""
    total = 0
    for cat_key, cat_label in CATEGORIES.items():
        effects = list_effects(category=cat_key)
        if not effects:
            continue
        total += len(effects)
        print(f"\n  {cat_label} ({len(effects)})")
        print(f"  {'—' * 50}")
        for e in effects:
            print(f"    {e['name']:15s} — {e['description']}")
            params_str = ", ".join(f"{k}={v}" for k, v in e["params"].items())
            print(f"    {'':15s}   Params: {params_str}")

    print(f"\n  Total: {total} effects")
    print(f"  Use 'holoshift info <effect>' for details.\n")


def cmd_info(args):
    """Show detailed info about a single effect."""
    name = args.effect_name
    if name not in EFFECTS:
        matches = [n for n in EFFECTS if name in n]
        if matches:
            raise ValueError(f"Unknown effect: {name}. Did you mean: {', '.join(matches)}?")
        raise ValueError(f"Unknown effect: {name}. Use 'holoshift list-effects' to see all.")

    entry = EFFECTS[name]
    cat = entry.get("category", "other")
    print(f"\n  {name}")
    print(f"  {'—' * 40}")
    print(f"  Category:    {CATEGORIES.get(cat, cat).upper()}")
    print(f"  Description: {entry['description']}")
    print(f"\n  Parameters:")
    for k, v in entry["params"].items():
        print(f"    {k:20s} = {v}")
    print(f"\n  Example:")
    print(f"    holoshift apply in.png out.png --params edge_threshold=20 glow=(20,60,100)")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holoshift",
        description="Holoshift — holographic image effect",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    # apply
    p = sub.add_parser("apply", help="Apply the effect to an image")
    p.add_argument("input", help="Source image")
    p.add_argument("output", help="Destination image (.png keeps alpha)")
    p.add_argument("--effect", default="holographic", help="Effect name")
    p.add_argument("--params", nargs="*", help="Effect params as key=value pairs")
    p.add_argument("--glow-mode", choices=GLOW_MODES,
                   help="snapshot (order-independent, default) or inplace (row-major reference scan)")
    p.add_argument("--force", action="store_true", help="Overwrite existing output")

    # list-effects
    sub.add_parser("list-effects", help="List all available effects")

    # info
    p = sub.add_parser("info", help="Show detailed info about an effect")
    p.add_argument("effect_name", nargs="?", default="holographic", help="Effect name")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    commands = {
        "apply": cmd_apply,
        "list-effects": cmd_list_effects,
        "info": cmd_info,
    }

    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        commands[args.command](args)
    except (SafetyError, FileNotFoundError, ValueError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("%s failed", args.command)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
