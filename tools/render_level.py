#!/usr/bin/env python3
# Render generated levels to PNGs using Pillow (same look as the pygame view).

import argparse, os
from PIL import Image, ImageDraw

from stallrow.config import DEFAULT_CONFIG
from stallrow.geometry import ViewportMetrics
from stallrow.layout.generator import generate_level
from stallrow.render.scene import BACKGROUND, BOUNDARY_FILL, DOT_FILL, DOT_RATIO, OUTLINE, outline_width, unit_fill
from stallrow.rng import SeededRandom


def render_state(state, out_png):
    vp = state.viewport
    img = Image.new("RGB", (int(vp.width), int(vp.height)), BACKGROUND)
    draw = ImageDraw.Draw(img)
    lw = outline_width(state.scale_factor)
    for obj in state.objects:
        cx, cy, r = obj.center.x, obj.center.y, obj.radius
        box = (cx - r, cy - r, cx + r, cy + r)
        if obj.kind.is_boundary:
            draw.rectangle(box, fill=BOUNDARY_FILL, outline=OUTLINE, width=lw)
            continue
        draw.ellipse(box, fill=unit_fill(obj), outline=OUTLINE, width=lw)
        if obj.attributes.decorated:
            d = r * DOT_RATIO
            draw.ellipse((cx - d, cy - d, cx + d, cy + d), fill=DOT_FILL)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_png)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="first seed to render")
    ap.add_argument("--count", type=int, default=1, help="number of consecutive seeds")
    ap.add_argument("--width", type=int, default=800)
    ap.add_argument("--height", type=int, default=400)
    ap.add_argument("--padding", type=float, default=DEFAULT_CONFIG.edge_padding)
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    args = ap.parse_args()

    vp = ViewportMetrics(args.width, args.height, args.padding)
    for seed in range(args.seed, args.seed + args.count):
        state = generate_level(vp, SeededRandom(seed))
        render_state(state, os.path.join(args.outdir, f"seed_{seed:05d}.png"))
    print(f"Wrote {args.count} PNG(s) to {args.outdir}")


if __name__ == "__main__":
    main()
