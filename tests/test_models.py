"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability
and equality semantics.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from projector.core.models import Add, PrintAll, PrintKey, Remove, ResolvedConfig


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class TestOperations:
    def test_print_all_instances_equal(self) -> None:
        assert PrintAll() == PrintAll()

    def test_add_fields(self) -> None:
        op = Add(key="foo", value="bar")
        assert op.key == "foo"
        assert op.value == "bar"

    def test_variants_are_distinct(self) -> None:
        assert PrintKey(key="foo") != Remove(key="foo")

    @pytest.mark.parametrize(
        "op",
        [PrintKey(key="foo"), Add(key="foo", value="bar"), Remove(key="foo")],
    )
    def test_frozen(self, op: object) -> None:
        with pytest.raises(AttributeError):
            op.key = "changed"  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# ResolvedConfig
# ---------------------------------------------------------------------------

class TestResolvedConfig:
    def test_fields_accessible(self) -> None:
        cfg = ResolvedConfig(
            operation=PrintAll(),
            store_path=Path("/tmp/store.json"),
            working_directory=Path("/work"),
        )
        assert cfg.operation == PrintAll()
        assert cfg.store_path == Path("/tmp/store.json")
        assert cfg.working_directory == Path("/work")

    def test_frozen(self) -> None:
        cfg = ResolvedConfig(
            operation=PrintAll(),
            store_path=Path("/tmp/store.json"),
            working_directory=Path("/work"),
        )
        with pytest.raises(AttributeError):
            cfg.store_path = Path("/elsewhere")  # type: ignore[misc]
