"""Tests for table rendering helpers."""

from io import StringIO

from rich.console import Console

from aml_models.output.tables import flatten_paths, kv_table, make_table


def _render(table) -> str:
    buf = StringIO()
    console = Console(file=buf, force_terminal=True, width=120)
    console.print(table)
    return buf.getvalue()


class TestTables:
    def test_make_table(self):
        out = _render(make_table("Test", ["A", "B"], [["1", "2"], ["3", None]]))
        assert "Test" in out
        assert "1" in out
        assert "3" in out

    def test_kv_table(self):
        out = _render(kv_table({"key1": "val1", "key2": False}, title="KV"))
        assert "key1" in out
        assert "val1" in out
        assert "no" in out

    def test_kv_table_none_values(self):
        assert "key" in _render(kv_table({"key": None}))


class TestFlattenPaths:
    def test_nested(self):
        data = {"a": {"b": 1, "c": [{"d": 2}, "e"]}}
        assert flatten_paths(data) == {"a.b": 1, "a.c[0].d": 2, "a.c[1]": "e"}

    def test_empty_containers_are_leaves(self):
        assert flatten_paths({"tags": {}, "items": []}) == {"tags": {}, "items": []}

    def test_scalar(self):
        assert flatten_paths(5, "root") == {"root": 5}
