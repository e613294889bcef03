# main.py
import argparse
import logging

import pygame # type: ignore

from .audio import AudioPlayer, SAMPLE_RATE
from .config import Config
from .game import handle_input, draw_game, draw_overlay
from .scores import JsonHighScoreStore, MemoryHighScoreStore, default_score_path
from .session import GameSession

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size)
    parser.add_argument("--interval", type=int, default=defaults.move_interval_ms,
                        help="milliseconds between moves")
    parser.add_argument("--growth", type=int, default=defaults.growth_increment)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed food placement (random if omitted)")
    parser.add_argument("--scores", default=default_score_path(),
                        help="high score file")
    parser.add_argument("--no-save", action="store_true", help="keep the high score in memory only")
    parser.add_argument("--mute", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        seed=args.seed,
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        move_interval_ms=args.interval,
        growth_increment=args.growth,
        win_length=args.width * args.height,
        start_cell=(0, args.height // 2),
    )


def init_pygame() -> None:
    # mixer settings only apply if given before pygame.init() starts the mixer
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 2)
    pygame.init()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)
    store = MemoryHighScoreStore() if args.no_save else JsonHighScoreStore(args.scores)

    init_pygame()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = GameSession(cfg, high_scores=store)
    audio = AudioPlayer(session.events, enabled=not args.mute)
    logger.info("Board %dx%d, best so far %d", cfg.width, cfg.height, session.view().high_score)

    running = True
    while running:
        # 1) input
        now = pygame.time.get_ticks()
        running = handle_input(session, now, audio)
        if not running:
            break

        # 2) update (movement gated inside the simulation)
        session.tick(pygame.time.get_ticks())

        # 3) render
        draw_game(screen, font, session.view(), cfg.cell_size)
        draw_overlay(screen, font, session, audio.muted)
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
