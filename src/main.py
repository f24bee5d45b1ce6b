"""`python -m main` inside `src/`: same commands as the `bazelify` script.

Windows consoles get UTF-8 streams so Rich tables and paths with non-ASCII
names print.
"""

from __future__ import annotations

import sys

if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
