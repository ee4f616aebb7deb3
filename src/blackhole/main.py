"""
Main entry point for Blackhole Jumper.

Runs the game in a desktop pygame window.
"""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

from blackhole.config.settings import Settings, get_settings
from blackhole.config.variants import VariantNotFound, list_variants, load_variant
from blackhole.core.events import EventBus
from blackhole.game.session import GameSession
from blackhole.game.world import Canvas
from blackhole.graphics.sprites import SpriteSheet
from blackhole.storage.highscore import HighScoreBoard, JsonHighScoreStore

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure logging with console and optional file output."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # File handler - truncate on each run for fresh logs
    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        except OSError as e:
            logging.warning(f"Cannot open log file {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logging.info(f"Logging to file: {log_file}")

    # Per-frame events are noisy
    logging.getLogger("blackhole.core.events").setLevel(logging.INFO)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="blackhole-jumper",
        description="Jump between falling platforms, dodge meteors, stay out of the black hole.",
    )
    parser.add_argument("--variant", help="Game variant preset (default from settings)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible spawning")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--list-variants", action="store_true", help="List variant presets and exit")
    return parser.parse_args(argv)


def build_session(
    settings: Settings,
    variant: str,
    seed: int | None = None,
    event_bus: EventBus | None = None,
) -> GameSession:
    """Assemble a session from settings: preset, canvas, high score board and RNG."""
    config = load_variant(variant, settings.variants_path)
    store = JsonHighScoreStore(settings.high_score_path, settings.high_score_key)
    canvas = Canvas(float(settings.display.width), float(settings.display.height))

    session = GameSession(
        config,
        canvas=canvas,
        board=HighScoreBoard(store),
        rng=random.Random(seed),
        event_bus=event_bus or EventBus(),
    )
    session.attach()
    logger.info(f"Session built: variant={config.name} seed={seed} best={session.best:.1f}s")
    return session


async def run_game(settings: Settings, session: GameSession) -> None:
    """Run the pygame window until it is closed."""
    from blackhole.simulator.window import GameWindow, WindowConfig

    display = settings.display
    window_config = WindowConfig(
        width=display.width,
        height=display.height,
        scale=display.scale,
        title=display.title,
        fullscreen=display.fullscreen,
        fps=display.fps,
        reset_delay_ms=settings.reset_delay_ms,
    )
    sprites = SpriteSheet(settings.assets_path, enabled=session.config.features.sprites)
    window = GameWindow(session, config=window_config, sprites=sprites)

    await window.run()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)
    settings = get_settings()

    if args.list_variants:
        for name in list_variants(settings.variants_path):
            print(name)
        return 0

    setup_logging(debug=args.debug or settings.debug, log_file=settings.log_file)

    variant = args.variant or settings.variant
    seed = args.seed if args.seed is not None else settings.seed

    try:
        session = build_session(settings, variant, seed)
    except VariantNotFound as e:
        logger.error(str(e))
        return 2

    try:
        asyncio.run(run_game(settings, session))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        session.detach()

    return 0


if __name__ == "__main__":
    sys.exit(main())
