#!/usr/bin/env python
"""Enforce that `__all__` is assigned once, as the last top-level statement.

Modules without `__all__` are skipped. Mutations such as `__all__ += [...]`
or `__all__.append(...)` are rejected.
"""

from __future__ import annotations

import ast
import sys
import argparse
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DIRS = ("mcp_unity",)


def _is_all(node: ast.AST) -> bool:
    return isinstance(node, ast.Name) and node.id == "__all__"


def _is_assignment(node: ast.stmt) -> bool:
    if isinstance(node, ast.Assign):
        return len(node.targets) == 1 and _is_all(node.targets[0])
    if isinstance(node, ast.AnnAssign):
        return _is_all(node.target) and node.value is not None
    return False


def _is_mutation(node: ast.stmt) -> bool:
    if isinstance(node, ast.Assign):
        return any(_is_all(t) for t in node.targets) and not _is_assignment(node)
    if isinstance(node, ast.AugAssign):
        return _is_all(node.target)
    if isinstance(node, ast.Delete):
        return any(_is_all(t) for t in node.targets)
    if isinstance(node, ast.Expr) and isinstance(node.value, ast.Call):
        func = node.value.func
        return isinstance(func, ast.Attribute) and _is_all(func.value)
    return False


def collect_violations(filepath: Path, root: Path) -> list[str]:
    try:
        tree = ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return []

    rel = filepath.relative_to(root)
    assigns = [idx for idx, node in enumerate(tree.body) if _is_assignment(node)]
    violations = [
        f"  {rel}:{node.lineno} non-canonical `__all__` usage" for node in tree.body if _is_mutation(node)
    ]
    if not assigns:
        return violations
    if len(assigns) > 1:
        violations.extend(f"  {rel}:{tree.body[idx].lineno} multiple `__all__` assignments" for idx in assigns)
        return violations

    for node in tree.body[assigns[0] + 1 :]:
        violations.append(f"  {rel}:{node.lineno} {type(node).__name__} after `__all__`")
    return violations


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Enforce that __all__ is defined once and placed at module bottom.")
    parser.add_argument("--dirs", nargs="+", default=list(DEFAULT_DIRS), help="Directories to scan")
    parser.add_argument("--root", default=str(ROOT), help="Project root (default: repository root)")
    args = parser.parse_args(argv)

    root = Path(args.root).resolve()
    violations: list[str] = []
    for d in args.dirs:
        scan_dir = (root / d).resolve()
        if not scan_dir.is_dir():
            continue
        for py_file in sorted(scan_dir.rglob("*.py")):
            if "__pycache__" in py_file.parts:
                continue
            violations.extend(collect_violations(py_file, root))

    if violations:
        print("__all__ placement violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
