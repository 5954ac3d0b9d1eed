from __future__ import annotations

import re
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

_DISALLOWED = (
    re.compile(r"\bOptional\["),
    re.compile(r"\btyping\.Optional\b"),
    re.compile(r"\bUnion\[[^\]]*\bNone\b"),
)


def _source_files() -> list[Path]:
    files = sorted((ROOT / "hexlattice").rglob("*.py"))
    files.extend(
        path for path in sorted((ROOT / "tests").rglob("*.py")) if path.name != Path(__file__).name
    )
    return files


@pytest.mark.parametrize("path", _source_files(), ids=lambda path: path.name)
def test_optional_is_spelled_with_union_operator(path: Path) -> None:
    text = path.read_text(encoding="utf-8")
    offending = [pattern.pattern for pattern in _DISALLOWED if pattern.search(text)]
    assert not offending, f"PEP 604 violations in {path.relative_to(ROOT)}: {offending}"
