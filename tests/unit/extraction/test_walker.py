"""Unit tests for collecting values along a path."""

from alidns_slim.extraction import ABSENT, build_shape, collect, decode, parse_path


def _collect(doc, path, element_type=object):
    segments = parse_path(path)
    return list(collect(decode(build_shape(element_type, segments), doc), segments))


class TestCollect:
    def test_no_wildcard_yields_exactly_one(self):
        assert _collect({"a": {"b": 3}}, "a.b", int) == [3]

    def test_no_wildcard_missing_yields_one_absent(self):
        assert _collect({"a": {}}, "a.b", int) == [ABSENT]

    def test_empty_path_yields_document(self):
        doc = {"x": 1}
        assert _collect(doc, "") == [doc]

    def test_wildcard_preserves_array_order(self):
        doc = {"L": [{"v": 3}, {"v": 1}, {"v": 2}]}
        assert _collect(doc, "L.*.v", int) == [3, 1, 2]

    def test_wildcard_keeps_position_of_missing_key(self):
        """Test N elements give N results even when one lacks the key."""
        doc = {"L": [{"v": 1}, {}, {"v": 3}]}
        assert _collect(doc, "L.*.v", int) == [1, ABSENT, 3]

    def test_wildcard_over_empty_array_yields_nothing(self):
        assert _collect({"L": []}, "L.*.v", int) == []

    def test_wildcard_over_missing_array_yields_absent(self):
        assert _collect({}, "L.*.v", int) == [ABSENT]

    def test_wildcard_over_non_array_yields_absent(self):
        assert _collect({"L": "oops"}, "L.*.v", int) == [ABSENT]

    def test_trailing_wildcard_yields_elements(self):
        assert _collect({"L": [1, 2]}, "L.*", int) == [1, 2]

    def test_nested_wildcards_flatten_depth_first(self):
        doc = {
            "Groups": [
                {"Items": [{"id": 1}, {"id": 2}]},
                {"Items": []},
                {"Items": [{"id": 3}]},
            ]
        }
        assert _collect(doc, "Groups.*.Items.*.id", int) == [1, 2, 3]

    def test_collect_is_lazy(self):
        segments = parse_path("L.*")
        values = collect({"L": [1, 2, 3]}, segments)
        assert next(values) == 1
        assert list(values) == [2, 3]

    def test_idempotent(self):
        """Test walking twice over the same instance yields the same values."""
        segments = parse_path("L.*.v")
        instance = decode(build_shape(int, segments), {"L": [{"v": 1}, {"v": 2}]})
        assert list(collect(instance, segments)) == list(collect(instance, segments))
