#!/usr/bin/env python
"""Reject stale-code markers in the bridge package.

Modules under mcp_unity/ describe the current behavior only; words that
flag old code paths or temporary patches are not allowed.
"""

from __future__ import annotations

import re
import sys
import argparse
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = "mcp_unity"

PATTERNS = [
    re.compile(r"\blegacy\b", re.IGNORECASE),
    re.compile(r"\bdeprecated\b", re.IGNORECASE),
    re.compile(r"\bworkaround\b", re.IGNORECASE),
    re.compile(r"\bhack\b", re.IGNORECASE),
    re.compile(r"\bbackward(?:\s|-)?compat(?:ible|ibility)\b", re.IGNORECASE),
]


def collect_violations(path: Path, root: Path) -> list[str]:
    violations: list[str] = []
    rel = path.relative_to(root)
    for idx, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        for pattern in PATTERNS:
            if pattern.search(line):
                violations.append(f"  {rel}:{idx} contains prohibited marker `{pattern.pattern}`")
                break
    return violations


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reject stale-code markers in package modules.")
    parser.add_argument("--root", default=str(ROOT), help="Project root (default: repository root)")
    args = parser.parse_args(argv)

    root = Path(args.root).resolve()
    violations: list[str] = []
    for py_file in sorted((root / PACKAGE).rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        violations.extend(collect_violations(py_file, root))

    if violations:
        print("Prohibited marker violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
