"""Tests for the persisted translations file."""

import json

import pytest

from mcp_translations.errors import ErrorCategory, PersistError, TranslationFileError
from mcp_translations.persist import TranslationMap, dump_translation_map, load_translation_map


class TestTranslationMap:
    def test_sorted_indented_json(self):
        mapping = TranslationMap({"B": "2", "A": "1"})
        assert mapping.to_json() == '{\n  "A": "1",\n  "B": "2"\n}'

    def test_rejects_non_string_values(self):
        with pytest.raises(ValueError):
            TranslationMap.model_validate({"A": 1})


class TestDump:
    def test_writes_file(self, tmp_path):
        target = tmp_path / "out.json"
        result = dump_translation_map({"K": "v"}, target)
        assert result == target
        assert json.loads(target.read_text(encoding="utf-8")) == {"K": "v"}

    def test_same_mapping_same_bytes(self, tmp_path):
        first = tmp_path / "first.json"
        second = tmp_path / "second.json"
        dump_translation_map({"B": "2", "A": "1"}, first)
        dump_translation_map({"A": "1", "B": "2"}, second)
        assert first.read_bytes() == second.read_bytes()

    def test_schema_violation(self, tmp_path):
        with pytest.raises(PersistError) as exc_info:
            dump_translation_map({"K": None}, tmp_path / "out.json")
        assert exc_info.value.category == ErrorCategory.VALIDATION
        assert not (tmp_path / "out.json").exists()

    def test_unencodable_value(self, tmp_path):
        """Lone surrogates cannot be written as UTF-8."""
        with pytest.raises(PersistError) as exc_info:
            dump_translation_map({"K": "\ud800"}, tmp_path / "out.json")
        assert exc_info.value.category in (ErrorCategory.STORAGE, ErrorCategory.VALIDATION)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(PersistError) as exc_info:
            dump_translation_map({"K": "v"}, tmp_path / "nope" / "out.json")
        assert exc_info.value.context.operation == "persist"


class TestLoad:
    def test_reads_dumped_file(self, tmp_path):
        target = tmp_path / "out.json"
        dump_translation_map({"A": "1", "B": ""}, target)
        assert load_translation_map(target) == {"A": "1", "B": ""}

    def test_missing_file(self, tmp_path):
        with pytest.raises(TranslationFileError) as exc_info:
            load_translation_map(tmp_path / "missing.json")
        assert exc_info.value.category == ErrorCategory.PARSE

    def test_invalid_json(self, tmp_path):
        target = tmp_path / "bad.json"
        target.write_text("{not json", encoding="utf-8")
        with pytest.raises(TranslationFileError):
            load_translation_map(target)

    def test_wrong_shape(self, tmp_path):
        target = tmp_path / "list.json"
        target.write_text('["A", "B"]', encoding="utf-8")
        with pytest.raises(TranslationFileError):
            load_translation_map(target)
