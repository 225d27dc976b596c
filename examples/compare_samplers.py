#!/usr/bin/env python3
"""Compare texture sampler modes on a procedural checkerboard.

This script builds a checkerboard HDR image, generates its mip pyramid with
progress output, prints a few sample values for every sampler mode, and
optionally shows the magnified sampler comparison and the pyramid mosaic.

Usage:
    python -m examples.compare_samplers [options]

Options:
    --size SIZE         Checkerboard size in texels (default: 37)
    --checks CHECKS     Number of checks per side (default: 8)
    --mode MODE         Mode for the pyramid preview (default: trilinear)
    --lod LOD           Level of detail for trilinear samples (default: 1.5)
    --cpu               Force the Taichi CPU backend
    --no-show           Do not open Matplotlib windows
    --quiet             Suppress progress output

Example:
    python -m examples.compare_samplers --size 64 --lod 2.25 --no-show
"""

from __future__ import annotations

import argparse
import sys

import numpy as np
import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare texture sampler modes on a checkerboard.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=37,
        help="Checkerboard size in texels (default: 37)",
    )
    parser.add_argument(
        "--checks",
        type=int,
        default=8,
        help="Number of checks per side (default: 8)",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default="trilinear",
        help="Mode for the pyramid preview: nearest, bilinear or trilinear "
        "(default: trilinear)",
    )
    parser.add_argument(
        "--lod",
        type=float,
        default=1.5,
        help="Level of detail for trilinear samples (default: 1.5)",
    )
    parser.add_argument(
        "--cpu",
        action="store_true",
        help="Force the Taichi CPU backend",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not open Matplotlib windows",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def make_checkerboard(size: int, checks: int):
    """Create a size x size checkerboard of bright and dark HDR checks."""
    from src.texturing.core.image import HDRImage

    coords = np.arange(size) * checks // max(size, 1)
    parity = (coords[:, None] + coords[None, :]) % 2
    pixels = np.where(parity[..., None] == 0, 4.0, 0.05).astype(np.float32)
    # Tint the channels so channel mixups are visible
    pixels *= np.array([1.0, 0.8, 0.6], dtype=np.float32)
    return HDRImage.from_array(pixels)


def compare_samplers(
    size: int = 37,
    checks: int = 8,
    mode: str = "trilinear",
    lod: float = 1.5,
    show: bool = True,
    quiet: bool = False,
) -> None:
    """Build a checkerboard texture and report samples for every mode.

    Args:
        size: Checkerboard size in texels.
        checks: Number of checks per side.
        mode: Sampler mode name used for the pyramid preview.
        lod: Level of detail for trilinear samples.
        show: If True, open Matplotlib preview windows.
        quiet: If True, suppress progress output.
    """
    # Lazy imports to allow Taichi initialization first
    from src.texturing.textures.texture import ImageTexture, SamplerMode

    preview_mode = SamplerMode.from_name(mode)
    image = make_checkerboard(size, checks)

    if not quiet:
        print(f"Building {preview_mode.name.lower()} texture ({size}x{size})...")

    def progress_callback(done: int, total: int) -> None:
        if not quiet:
            print(f"\r  Mip level {done}/{total}", end="", flush=True)

    texture = ImageTexture(preview_mode, image, progress=progress_callback)

    if not quiet:
        if texture.levels:
            print()  # Newline after progress
            sizes = " -> ".join(f"[{lvl.width}x{lvl.height}]" for lvl in texture.levels)
            print(f"  [{size}x{size}] -> {sizes}")
        print(f"Sampling at lod {lod:g}:")
        for sampler_mode in SamplerMode:
            sampled = ImageTexture(sampler_mode, image)
            for uv in [(0.0, 0.0), (0.5, 0.5), (0.51, 0.49), (1.0, 1.0)]:
                color = sampled.evaluate(uv, lod)
                print(
                    f"  {sampler_mode.name.lower():>9} uv=({uv[0]:.2f}, {uv[1]:.2f}) "
                    f"-> ({color.r:.4f}, {color.g:.4f}, {color.b:.4f})"
                )

    if show:
        from src.texturing.preview.display import show_pyramid, show_sampler_comparison

        show_sampler_comparison(image, width=256, height=256, lod=lod, block=False)
        show_pyramid(texture)


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Initialize Taichi
    # Use GPU if available, fall back to CPU
    if args.cpu:
        ti.init(arch=ti.cpu)
    else:
        try:
            ti.init(arch=ti.gpu)
            if not args.quiet:
                print("Using GPU backend")
        except Exception:
            ti.init(arch=ti.cpu)
            if not args.quiet:
                print("Using CPU backend")

    try:
        compare_samplers(
            size=args.size,
            checks=args.checks,
            mode=args.mode,
            lod=args.lod,
            show=not args.no_show,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
