"""Module entrypoint for ``python -m filepicker``.

Argument parsing and the picker interaction live in ``filepicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
