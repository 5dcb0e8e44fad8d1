#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/qapp_packager"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    core_modules = [
        PACKAGE / "errors.py",
        PACKAGE / "types.py",
        PACKAGE / "validate.py",
        PACKAGE / "schemas.py",
        PACKAGE / "render.py",
    ]
    for path in core_modules:
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import click",
                "from qapp_packager.application",
                "from qapp_packager.cli",
            ],
        )

    app_dir = PACKAGE / "application"
    for path in app_dir.glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import click",
                "from qapp_packager.cli",
                "from qapp_packager.adapters",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
