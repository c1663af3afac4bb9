# tools/run_game.py
# Interactive window: click a unit to regenerate the row.
#   R   force a regeneration
#   Esc quit
# The window is resizable; the new size applies to the next generation.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

try:
    from stallrow.config import DEFAULT_CONFIG, SPRITE_BOUNDARY_SIZE
    from stallrow.engine.state import GameSession
    from stallrow.geometry import Point, ViewportMetrics
    from stallrow.render.scene import SceneRenderer
    from stallrow.rng import SeededRandom
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="stallrow runtime")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=400)
    parser.add_argument("--padding", type=float, default=DEFAULT_CONFIG.edge_padding)
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible sequence")
    parser.add_argument("--boundary-size", type=float, default=DEFAULT_CONFIG.boundary_size)
    parser.add_argument("--sprite", action="store_true", help="use the larger image-variant stall size")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = DEFAULT_CONFIG.with_boundary_size(SPRITE_BOUNDARY_SIZE if args.sprite else args.boundary_size)
    session = GameSession(
        ViewportMetrics(args.width, args.height, args.padding),
        SeededRandom(args.seed),
        config,
    )

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(f"stallrow: seed {args.seed if args.seed is not None else 'random'}")
    clock = pygame.time.Clock()
    renderer = SceneRenderer(screen, font=pygame.font.SysFont("Consolas", 14))
    renderer.apply(session.start(), session.state)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    renderer.apply(session.regenerate(), session.state)
            elif event.type == pygame.VIDEORESIZE:
                session.resize(ViewportMetrics(event.w, event.h, args.padding))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = event.pos
                renderer.apply(session.tap(Point(x, y)), session.state)

        state = session.state
        caption = (
            f"gen {session.generation} units={state.unit_count} "
            f"scale={state.scale_factor:.3f} spacing={state.spacing:.1f}"
        )
        renderer.draw(caption)
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
