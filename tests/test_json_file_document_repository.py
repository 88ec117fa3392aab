"""Tests for the JSON file document repository."""
import json
from pathlib import Path

import pytest

from city_prices.core.exceptions import StorageError
from city_prices.infrastructure.persistence.repositories.json_file_document_repository import (
    JsonFileDocumentRepository,
)


@pytest.fixture
def sample_document():
    """Document with one city holding accented text."""
    return {"cities": [{"id": "bogota", "ciudad": "Bogotá", "moneda": "COP", "servicios_informales": []}]}


class TestJsonFileDocumentRepositoryLoad:
    """Test reading the document."""

    def test_missing_file_loads_empty_catalog(self, json_repository):
        assert json_repository.load() == {"cities": []}

    def test_corrupted_file_raises_storage_error(self, json_repository):
        path = Path(json_repository.data_file_path)
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError, match="corrupted"):
            json_repository.load()

    @pytest.mark.parametrize("content", ['{"ciudades": []}', '{"cities": {}}', "[]"])
    def test_document_without_cities_list_raises(self, json_repository, content):
        path = Path(json_repository.data_file_path)
        path.parent.mkdir(parents=True)
        path.write_text(content, encoding="utf-8")

        with pytest.raises(StorageError):
            json_repository.load()

    def test_unreadable_path_raises_storage_error(self, tmp_path):
        directory = tmp_path / "cities.json"
        directory.mkdir()

        with pytest.raises(StorageError, match="Cannot read"):
            JsonFileDocumentRepository(str(directory)).load()

    def test_invalid_utf8_raises_storage_error(self, json_repository):
        path = Path(json_repository.data_file_path)
        path.parent.mkdir(parents=True)
        path.write_bytes(b'{"cities": [{"id": "x", "ciudad": "Bogot\xe1"}]}')

        with pytest.raises(StorageError, match="UTF-8"):
            json_repository.load()

    @pytest.mark.parametrize("entry", ['"lima"', "42", "null", "[]"])
    def test_non_object_city_entry_raises(self, json_repository, entry):
        path = Path(json_repository.data_file_path)
        path.parent.mkdir(parents=True)
        path.write_text(f'{{"cities": [{{"id": "lima", "ciudad": "Lima"}}, {entry}]}}', encoding="utf-8")

        with pytest.raises(StorageError, match="entry #1"):
            json_repository.load()


class TestJsonFileDocumentRepositorySave:
    """Test replacing the document."""

    def test_save_and_load_round_trip(self, json_repository, sample_document):
        json_repository.save(sample_document)

        assert json_repository.load() == sample_document

    def test_save_creates_parent_directory(self, json_repository, sample_document):
        json_repository.save(sample_document)

        assert Path(json_repository.data_file_path).exists()

    def test_saved_file_is_readable_utf8(self, json_repository, sample_document):
        json_repository.save(sample_document)

        text = Path(json_repository.data_file_path).read_text(encoding="utf-8")
        assert "Bogotá" in text
        assert json.loads(text) == sample_document

    def test_save_leaves_no_temp_files(self, json_repository, sample_document):
        json_repository.save(sample_document)
        json_repository.save(sample_document)

        files = list(Path(json_repository.data_file_path).parent.iterdir())
        assert [f.name for f in files] == ["cities.json"]

    def test_unserializable_document_keeps_previous_file(self, json_repository, sample_document):
        json_repository.save(sample_document)

        with pytest.raises(StorageError, match="not serializable"):
            json_repository.save({"cities": [{"id": "x", "bad": object()}]})

        assert json_repository.load() == sample_document


class TestJsonFileDocumentRepositoryBackups:
    """Test timestamped backups."""

    def test_first_save_makes_no_backup(self, json_repository, sample_document):
        json_repository.save(sample_document)

        assert json_repository.list_backups() == []

    def test_backup_holds_previous_document(self, json_repository, sample_document):
        json_repository.save(sample_document)
        json_repository.save({"cities": []})

        backups = json_repository.list_backups()
        assert len(backups) == 1
        assert json.loads(backups[0].read_text(encoding="utf-8")) == sample_document

    def test_old_backups_are_pruned(self, json_repository, sample_document):
        for _ in range(4):
            json_repository.save(sample_document)

        assert len(json_repository.list_backups()) == json_repository.max_backups

    def test_backups_disabled_without_directory(self, tmp_path, sample_document):
        repository = JsonFileDocumentRepository(str(tmp_path / "cities.json"))

        repository.save(sample_document)
        repository.save(sample_document)

        assert repository.list_backups() == []
        assert [f.name for f in tmp_path.iterdir()] == ["cities.json"]
