"""Fail when mediares modules fall below their coverage floor in a coverage.py JSON report.

Generate the report with ``pytest --cov --cov-report=json`` first.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Final

MODULE_FLOORS: Final[dict[str, float]] = {
    "src/mediares/factory.py": 95.0,
    "src/mediares/contracts.py": 95.0,
    "src/mediares/resources/_inputs.py": 95.0,
    "src/mediares/resources/_image.py": 90.0,
    "src/mediares/color.py": 90.0,
    "src/mediares/exif.py": 85.0,
    "src/mediares/storage/_local.py": 90.0,
}


def _read_file_entries(report_path: Path) -> dict[str, object]:
    """Return the per-file section of a coverage JSON report."""
    report = json.loads(report_path.read_text(encoding="utf-8"))
    if not isinstance(report, dict) or not isinstance(report.get("files"), dict):
        msg = f"{report_path} is not a coverage.py JSON report with a 'files' object."
        raise TypeError(msg)
    return report["files"]


def _module_key(path: str) -> str:
    """Reduce a reported path to ``src/mediares/...`` regardless of OS or checkout location."""
    posix = path.replace("\\", "/").removeprefix("./")
    head, sep, tail = posix.rpartition("src/mediares/")
    if sep and (not head or head.endswith("/")):
        return sep + tail
    return posix


def _covered_percent(entry: object) -> float | None:
    summary = entry.get("summary") if isinstance(entry, dict) else None
    percent = summary.get("percent_covered") if isinstance(summary, dict) else None
    return float(percent) if isinstance(percent, int | float) else None


def find_shortfalls(report_path: Path, floors: dict[str, float] = MODULE_FLOORS) -> list[str]:
    """Return one message per module that is missing from the report or below its floor."""
    percents = {_module_key(path): _covered_percent(entry) for path, entry in _read_file_entries(report_path).items()}
    shortfalls: list[str] = []
    for module, floor in floors.items():
        percent = percents.get(module)
        if percent is None:
            shortfalls.append(f"{module}: not in coverage report")
        elif percent < floor:
            shortfalls.append(f"{module}: {percent:.2f}% covered, needs {floor:.2f}%")
    return shortfalls


def main(argv: list[str] | None = None) -> int:
    """Check the report and print shortfalls to stderr."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("report", nargs="?", default="coverage.json", help="coverage.py JSON report path.")
    args = parser.parse_args(argv)

    shortfalls = find_shortfalls(Path(args.report))
    for shortfall in shortfalls:
        sys.stderr.write(f"{shortfall}\n")
    return 1 if shortfalls else 0


if __name__ == "__main__":
    raise SystemExit(main())
