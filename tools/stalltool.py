#!/usr/bin/env python3
import argparse, json, os
from stallrow.config import DEFAULT_CONFIG
from stallrow.geometry import ViewportMetrics
from stallrow.layout.generator import generate_level
from stallrow.rng import SeededRandom


def level_for(args, seed):
    vp = ViewportMetrics(args.width, args.height, args.padding)
    return generate_level(vp, SeededRandom(seed))


def write_json(state, path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(state.to_dict(), f, indent=2)


def cmd_emit(args):
    write_json(level_for(args, args.seed), args.out)
    print(f"Wrote {args.out}")


def cmd_pack(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.seeds):
        write_json(level_for(args, seed), os.path.join(args.outdir, f"{seed:05d}.json"))
    print(f"Wrote {args.seeds} levels to {args.outdir}")


def add_viewport_args(p):
    p.add_argument('--width', type=float, default=800)
    p.add_argument('--height', type=float, default=400)
    p.add_argument('--padding', type=float, default=DEFAULT_CONFIG.edge_padding)


def main(argv=None):
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    add_viewport_args(p1)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('pack')
    p2.add_argument('--seeds', type=int, required=True)
    p2.add_argument('--outdir', type=str, required=True)
    add_viewport_args(p2)
    p2.set_defaults(func=cmd_pack)
    args = p.parse_args(argv)
    args.func(args)


if __name__ == '__main__':
    main()
