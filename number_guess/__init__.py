import logging
import os
import random

from dotenv import load_dotenv

from number_guess.config import Settings
from number_guess.console import ConsoleUI
from number_guess.game import Game
from number_guess.utils import Stopwatch

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    # Gameplay text owns stdout, so logs go to stderr or to a file
    handler_options = {'filename': settings.log_file} if settings.log_file else {}
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format=LOG_FORMAT,
        **handler_options,
    )


def create_game(reader=input, writer=print, settings: Settings | None = None) -> Game:
    # Load optional settings from the .env file
    load_dotenv()

    settings_from_env = settings is None
    if settings_from_env:
        settings = Settings.from_env()
    configure_logging(settings)

    if settings_from_env and settings.seed is None and os.environ.get('GUESS_SEED'):
        logger.warning(f"Ignoring GUESS_SEED={os.environ['GUESS_SEED']!r}: not an integer")

    return Game(
        ui=ConsoleUI(reader=reader, writer=writer),
        rng=random.Random(settings.seed),
        stopwatch=Stopwatch(),
    )
