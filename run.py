import logging
import sys

from number_guess import create_game

logger = logging.getLogger(__name__)


def main() -> int:
    game = create_game()
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        # Input closed (or Ctrl+C) in the middle of a prompt
        logger.warning("Input stream closed before the session finished")
        game.ui.write_line("")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
