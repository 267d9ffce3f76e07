"""Tests for the Gradio UI callbacks (called directly, no UI server)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

from json_table_renderer.handlers import load_json_file, parse_pasted_json, render_document_handler, save_document_handler


class TestLoadJsonFile:

    def test_loads_file_into_editor(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps([{"a": 1, "b": {"c": 2}}]), encoding="utf-8")
        message, update = load_json_file(str(path))
        assert message == "Successfully loaded 1 records with 2 columns."
        assert json.loads(update["value"]) == [{"a": 1, "b": {"c": 2}}]

    def test_no_file(self):
        message, _ = load_json_file(None)
        assert message == "No file uploaded."

    def test_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        message, _ = load_json_file(str(path))
        assert message.startswith("Error parsing JSON")


class TestRenderDocument:

    def test_single_object_is_one_record(self):
        data, message = parse_pasted_json('{"a": 1}')
        assert data == {"a": 1}
        assert message == "Parsed 1 records."

    def test_renders_with_title(self):
        document, _ = render_document_handler('[{"a": 1}]', "Report")
        assert document.startswith("# Report\n")
        assert "│ 1          │" in document

    def test_blank_title_uses_default(self):
        document, _ = render_document_handler('[{"a": 1}]', "")
        assert document.startswith("# Dynamic Data Table\n")

    def test_invalid_json(self):
        document, message = render_document_handler("[{", "T")
        assert document == ""
        assert message.startswith("Error parsing JSON")


class TestSaveDocument:

    def test_saves_to_output_dir(self, tmp_path):
        path, message = save_document_handler("# T\n", "saved.md", tmp_path)
        assert path == str(tmp_path / "saved.md")
        assert message == f"Saved to {tmp_path / 'saved.md'}"
        assert (tmp_path / "saved.md").read_text(encoding="utf-8") == "# T\n"

    def test_nothing_rendered(self, tmp_path):
        path, message = save_document_handler("", "x.md", tmp_path)
        assert path is None
        assert message == "Render a table before saving."
