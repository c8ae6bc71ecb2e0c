"""Tests for architecture import boundaries.

These tests keep the layering intact:
- The domain layer does not import infrastructure or CLI code
- The application layer does not import infrastructure or CLI code
- Only the CLI imports the CLI
"""

from __future__ import annotations

import ast
from pathlib import Path
import re

import pytest

PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "mapping_suggester"


def get_python_files(directory: Path) -> list[Path]:
    return list(directory.rglob("*.py"))


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Module names of every import statement in a Python file."""
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    imports: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            imports.append(node.module)
    return imports


def find_violations(directory: Path, forbidden_pattern: str) -> list[str]:
    pattern = re.compile(forbidden_pattern)
    violations = []
    for py_file in get_python_files(directory):
        forbidden = [
            imp for imp in extract_imports_from_file(py_file) if pattern.search(imp)
        ]
        if forbidden:
            rel_path = py_file.relative_to(PACKAGE_ROOT.parent)
            violations.append(f"{rel_path}: {forbidden}")
    return violations


class TestLayerBoundaries:
    @pytest.mark.parametrize("layer", ["domain", "application"])
    def test_core_layers_do_not_import_infrastructure(self, layer: str):
        violations = find_violations(
            PACKAGE_ROOT / layer, r"(^|\.)infrastructure(\.|$)"
        )

        assert not violations, f"{layer} imports infrastructure:\n" + "\n".join(
            violations
        )

    @pytest.mark.parametrize("layer", ["domain", "application", "infrastructure"])
    def test_only_cli_imports_cli(self, layer: str):
        violations = find_violations(PACKAGE_ROOT / layer, r"(^|\.)cli(\.|$)")

        assert not violations, f"{layer} imports CLI modules:\n" + "\n".join(
            violations
        )

    def test_domain_imports_no_third_party_io(self):
        violations = find_violations(PACKAGE_ROOT / "domain", r"^(pandas|click|rich)")

        assert not violations, "domain imports I/O libraries:\n" + "\n".join(
            violations
        )
