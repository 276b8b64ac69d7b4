#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generate a procedural miniature city and render it as a hand-drawn PNG.

Optionally exports:

  - buildings.json
  - scene.json
  - drawing.json

Runs headless; no window is opened.
"""

from __future__ import annotations

import argparse
from pathlib import Path


def main() -> int:
    parser = argparse.ArgumentParser(description="Render a procedural city sketch to PNG.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for deterministic generation.")
    parser.add_argument("--count", type=int, default=None, help="Number of buildings to place (default from config).")
    parser.add_argument("--width", type=int, default=None, help="Viewport width in pixels.")
    parser.add_argument("--height", type=int, default=None, help="Viewport height in pixels.")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML file overriding default.yaml.")
    parser.add_argument("--out", type=Path, default=Path("city.png"), help="Output PNG path.")
    parser.add_argument("--export-dir", type=Path, default=None, help="Also export JSON data into this directory.")
    parser.add_argument("--overwrite", action="store_true", help="Overwrite the output PNG if it exists.")
    args = parser.parse_args()

    from sketchcity import CityFunctionCall, Config, Logger  # noqa: E402

    if args.out.exists() and not args.overwrite:
        raise FileExistsError(f"Target already exists: {args.out}. Pass --overwrite to replace it.")

    config = Config(str(args.config) if args.config else None)
    if args.width is not None:
        config["render.viewport.width"] = args.width
    if args.height is not None:
        config["render.viewport.height"] = args.height
    Logger.configure_from(config)

    cfc = CityFunctionCall(config, seed=args.seed, building_count=args.count)
    cfc.generate_city()
    canvas = cfc.create_canvas()
    cfc.render(canvas)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    canvas.save(str(args.out))
    if args.export_dir is not None:
        cfc.export_city(str(args.export_dir))

    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
