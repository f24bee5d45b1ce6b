"""Run bazelify from a source checkout.

`python -m main resolve -p path/to/dart_package` resolves bazel/pub and checks
the package's pubspec.yaml without installing the `bazelify` script. Puts
`src/` on `sys.path` first so `cli.main` imports.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
