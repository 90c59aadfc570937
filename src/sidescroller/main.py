"""
Main entry point for the side scroller.

Builds the engine from settings and launches the desktop simulator.
"""

import asyncio
import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_engine(settings):
    """Create an engine wired to the persistent high score file."""
    from sidescroller.core.clock import MonotonicClock
    from sidescroller.core.events import EventBus
    from sidescroller.core.scheduler import TickScheduler
    from sidescroller.game.engine import GameEngine
    from sidescroller.storage.highscore import JsonHighScoreStore

    return GameEngine(
        settings=settings.game,
        clock=MonotonicClock(),
        scheduler=TickScheduler(),
        store=JsonHighScoreStore(settings.highscore_file),
        event_bus=EventBus(),
    )


async def run_simulator(settings) -> None:
    """Run the pygame simulator."""
    from sidescroller.simulator.window import SimulatorWindow, WindowConfig

    engine = build_engine(settings)
    window = SimulatorWindow(
        engine=engine,
        config=WindowConfig.from_settings(settings.simulator),
    )
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv
    from sidescroller.settings import get_settings

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Side scroller starting...")

    try:
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Side scroller stopped")


if __name__ == "__main__":
    main()
