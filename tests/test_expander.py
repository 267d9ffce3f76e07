"""Unit tests for expanding one record into physical rows."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from json_table_renderer.expander import expand_record


class TestExpandRecord:

    def test_flat_record_is_one_row(self):
        assert expand_record({"a": 1, "b": {"c": 2}}, ["a", "b.c"]) == [[1, 2]]

    def test_scalar_only_on_first_row(self):
        record = {"user_id": 1, "items": [{"n": "a"}, {"n": "b"}]}
        assert expand_record(record, ["user_id", "items.n"]) == [[1, "a"], [None, "b"]]

    def test_primitive_list_stays_one_cell(self):
        assert expand_record({"tags": ["x", "y"]}, ["tags"]) == [[["x", "y"]]]

    def test_missing_field_is_empty(self):
        assert expand_record({"a": 1}, ["a", "b"]) == [[1, None]]

    def test_uneven_expansions_align_by_index(self):
        record = {"a": [{"x": 1}, {"x": 2}, {"x": 3}], "b": [{"y": "p"}]}
        assert expand_record(record, ["a.x", "b.y"]) == [[1, "p"], [2, None], [3, None]]

    def test_sibling_columns_of_one_list_stay_together(self):
        record = {"items": [{"n": "a", "q": 1}, {"n": "b"}]}
        assert expand_record(record, ["items.n", "items.q"]) == [["a", 1], ["b", None]]

    def test_nested_lists_flatten_into_rows(self):
        record = {"o": [{"s": [{"v": 1}, {"v": 2}]}, {"s": [{"v": 3}]}]}
        assert expand_record(record, ["o.s.v"]) == [[1], [2], [3]]

    def test_empty_fan_out_still_gives_a_row(self):
        assert expand_record({"id": 1, "items": []}, ["id", "items.n"]) == [[1, None]]
        assert expand_record({"items": []}, ["items.n"]) == [[None]]

    def test_no_columns(self):
        assert expand_record({"a": 1}, []) == [[]]
