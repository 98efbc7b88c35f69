from __future__ import annotations
import logging

from isola.config import LOG_LEVEL
from isola.game.controller import run_game
from isola.ui.render import show_rules

log = logging.getLogger(__name__)


def pause(msg: str = "Press enter to continue...") -> None:
    print(msg)
    input()


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        show_rules()
        pause("Press enter to start...")
        run_game()
        pause()
    except EOFError:
        # console closed; nothing left to ask, leave quietly
        log.info("input closed, exiting")
        print()


if __name__ == "__main__":
    main()
