"""Lineview CLI entry point.

Allows running via `python -m lineview` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .constants import ViewerConstants


def main() -> None:
    args = sys.argv[1:]
    if not args:
        print(ViewerConstants.MISSING_ARGUMENT_MESSAGE, file=sys.stderr)
        sys.exit(ViewerConstants.EXIT_FAILURE)

    # Lazy import so a bad invocation never touches the terminal
    from .viewer import Viewer
    try:
        viewer = Viewer.open(args[0])
    except (OSError, UnicodeDecodeError) as e:
        print(ViewerConstants.OPEN_FAILED_MESSAGE.format(e), file=sys.stderr)
        sys.exit(ViewerConstants.EXIT_FAILURE)
    viewer.run()


if __name__ == "__main__":  # pragma: no cover
    main()
