import sys
from pathlib import Path

import fncli

from . import config
from .core.errors import TickError
from .lib import ansi
from .logging_setup import setup_logging


def main():
    setup_logging(log_dir=config.LOG_DIR, console_level=config.get_log_level())
    ansi.use(ansi.DEFAULT if config.color_enabled() and sys.stdout.isatty() else ansi.PLAIN)
    fncli.autodiscover(Path(__file__).parent, "tick")

    user_args = sys.argv[1:]
    if not user_args:
        from .repl import session

        sys.exit(session())
    argv = ["tick", *user_args]
    try:
        code = fncli.dispatch(argv)
    except TickError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
