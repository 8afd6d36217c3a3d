"""Tests for bundled prompt template and JSON schema loading."""

from pathlib import Path

import pytest

from intake.documents.exceptions import PromptLoadError
from intake.documents.prompt_loader import load_json_schema, load_prompt_template

BUNDLED = ["classification", "pan", "aadhaar", "education"]


class TestLoadPromptTemplate:
    @pytest.mark.parametrize("name", BUNDLED)
    def test_bundled_templates_embed_schema(self, name: str) -> None:
        assert "{json_schema}" in load_prompt_template(name)

    def test_classification_template_takes_file_hints(self) -> None:
        template = load_prompt_template("classification")
        assert "File name: {file_name}" in template
        assert "{media_type}" in template

    def test_loads_from_custom_dir(self, tmp_path: Path) -> None:
        (tmp_path / "custom_prompt.txt").write_text("Read {json_schema}")
        assert load_prompt_template("custom", tmp_path) == "Read {json_schema}"

    def test_missing_file_raises_error(self, tmp_path: Path) -> None:
        with pytest.raises(PromptLoadError, match="Failed to load prompt template"):
            load_prompt_template("missing", tmp_path)


class TestLoadJsonSchema:
    @pytest.mark.parametrize("name", BUNDLED)
    def test_bundled_schemas_are_strict_objects(self, name: str) -> None:
        schema = load_json_schema(name)
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) == set(schema["properties"])

    def test_classification_schema_lists_categories(self) -> None:
        schema = load_json_schema("classification")
        assert schema["properties"]["category"]["enum"] == [
            "PAN",
            "AADHAAR",
            "ADMISSION",
            "MARKSHEET",
            "unknown",
        ]

    def test_missing_file_raises_error(self, tmp_path: Path) -> None:
        with pytest.raises(PromptLoadError, match="Failed to load JSON schema"):
            load_json_schema("missing", tmp_path)

    def test_invalid_json_raises_error(self, tmp_path: Path) -> None:
        (tmp_path / "broken_schema.json").write_text("{not json")
        with pytest.raises(PromptLoadError, match="Invalid JSON schema"):
            load_json_schema("broken", tmp_path)

    def test_non_object_raises_error(self, tmp_path: Path) -> None:
        (tmp_path / "list_schema.json").write_text("[]")
        with pytest.raises(PromptLoadError, match="must be an object"):
            load_json_schema("list", tmp_path)
