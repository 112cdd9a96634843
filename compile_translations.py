"""Compile gettext .po files into .mo files."""
from __future__ import annotations

import sys
from pathlib import Path

from ectype.core.catalog import compile_catalogs


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    root = Path(args[0]) if args else Path.cwd() / "locale"
    for mo_file in compile_catalogs(root):
        print(mo_file)


if __name__ == "__main__":
    main()
