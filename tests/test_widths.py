"""Unit tests for per-column width computation."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from json_table_renderer.widths import MAX_COLUMN_WIDTH, MIN_COLUMN_WIDTH, compute_widths


class TestComputeWidths:

    def test_short_values_use_minimum(self):
        assert compute_widths([{"a": 1}], ["a"]) == {"a": MIN_COLUMN_WIDTH}

    def test_label_length_counts(self):
        column = "a_really_long_field_name"
        assert compute_widths([{column: 1}], [column]) == {column: len(column)}

    def test_only_last_segment_of_label_counts(self):
        assert compute_widths([{"parent_object_name": {"x": 1}}], ["parent_object_name.x"])["parent_object_name.x"] == 10

    def test_long_label_is_clamped(self):
        column = "l" * 45
        assert compute_widths([{column: 1}], [column]) == {column: MAX_COLUMN_WIDTH}

    def test_value_length_counts(self):
        assert compute_widths([{"a": "v" * 15}, {"a": "w"}], ["a"]) == {"a": 15}

    def test_long_token_is_clamped(self):
        assert compute_widths([{"a": "z" * 40}], ["a"]) == {"a": MAX_COLUMN_WIDTH}

    def test_wrapped_words_measure_per_line(self):
        text = "word " * 10
        # Lines of at most 30 characters: "word word word word word word" is 29.
        assert compute_widths([{"a": text.strip()}], ["a"]) == {"a": 29}

    def test_primitive_list_measures_joined_text(self):
        assert compute_widths([{"tags": ["abcdef", "ghijkl"]}], ["tags"]) == {"tags": len("abcdef, ghijkl")}

    def test_fanned_out_values_are_joined(self):
        records = [{"items": [{"n": "aaaaaaaaaaaa"}, {"n": "b"}]}]
        assert compute_widths(records, ["items.n"]) == {"items.n": len("aaaaaaaaaaaa, b")}

    def test_missing_values_are_fine(self):
        assert compute_widths([{"a": 1}, {}], ["a", "b"]) == {"a": 10, "b": 10}

    def test_object_values_measure_as_json(self):
        assert compute_widths([{"a": {"key": "value12"}}], ["a"]) == {"a": len('{"key":"value12"}')}
