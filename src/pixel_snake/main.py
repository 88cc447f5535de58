# main.py
from __future__ import annotations
import argparse
import logging
import random

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, Config
from .controls import Command, InputRouter
from .models import Mode
from .render import draw_frame, load_fonts
from .scores import JsonFileScoreStore
from .session import Session

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> Config:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Pixel Snake")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="seed for food/power-up placement (default: random)")
    parser.add_argument("--scores-dir", type=str, default=defaults.scores_dir,
                        help="where the per-mode top-5 files live")
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--mode", type=str, default=defaults.mode,
                        choices=[m.value for m in Mode])
    parser.add_argument("--log-level", type=str, default=defaults.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    return Config(
        seed=args.seed,
        scores_dir=args.scores_dir,
        fps=args.fps,
        mode=args.mode,
        log_level=args.log_level,
    )


def main(argv=None):
    cfg = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    fonts = load_fonts()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Pixel Snake")
    clock = pygame.time.Clock()

    session = Session(
        store=JsonFileScoreStore(cfg.scores_dir),
        rng=random.Random(cfg.seed),
        mode=Mode(cfg.mode),
    )
    router = InputRouter()
    logger.info("started (seed=%s, scores in %s)", cfg.seed, cfg.scores_dir)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            intent = router.route(event)
            if intent is Command.QUIT:
                running = False
                break
            session.handle(intent)
        if not running:
            break

        # 2) update
        session.frame(pygame.time.get_ticks())

        # 3) render
        draw_frame(screen, fonts, session.snapshot())
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
