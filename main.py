import logging
import sys

from config_paths import USAGE
from menu_shell import MenuShell
from session_state import SessionState
from table_errors import TableError

from _version import __version__


def _configure_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    debug = "--debug" in args
    args = [a for a in args if a != "--debug"]
    _configure_logging(debug)

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    path = args[0] if args else None
    try:
        state = SessionState.open(path)
    except TableError as e:
        print(f"Error loading CSV file: {e}", file=sys.stderr)
        return 1

    MenuShell(state).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
