"""Unit tests for reading and writing properties.xml files."""

import logging
import xml.etree.ElementTree as ET

import pytest

from fitquery.properties.properties_file import (
    PROPERTIES_FILENAME,
    PropertiesFile,
    load_properties,
    parse_tag_list,
    save_properties,
    validate_tag,
)


@pytest.fixture
def page(tmp_path):
    (tmp_path / PROPERTIES_FILENAME).write_text(
        '<?xml version="1.0"?>\n'
        "<properties>\n"
        "\t<Edit>true</Edit>\n"
        "\t<Suite/>\n"
        "\t<Prune>true</Prune>\n"
        "\t<Suites>smoke, nightly</Suites>\n"
        "</properties>\n"
    )
    return tmp_path


@pytest.mark.parametrize(
    "text,expected",
    [
        ("smoke", {"smoke"}),
        ("smoke, nightly", {"smoke", "nightly"}),
        ("  smoke ,nightly,  ", {"smoke", "nightly"}),
        ("smoke,smoke", {"smoke"}),
        ("Smoke,smoke", {"Smoke", "smoke"}),
        ("", set()),
        (" , ", set()),
        (None, set()),
    ],
)
def test_parse_tag_list(text, expected):
    assert parse_tag_list(text) == expected


def test_load_properties_flags(page):
    record = load_properties(page)
    assert record is not None
    assert record.has_flag("Suite")
    assert record.has_flag("Prune")
    assert record.has_flag("Edit")
    assert not record.has_flag("Test")
    assert not record.has_flag("Static")


def test_flags_must_be_direct_children(tmp_path):
    (tmp_path / PROPERTIES_FILENAME).write_text("<properties><Help><Test/></Help></properties>")
    record = load_properties(tmp_path)
    assert record is not None
    assert not record.has_flag("Test")


def test_load_properties_tag_list_text(page):
    record = load_properties(page)
    assert record.tag_list_text() == "smoke, nightly"


def test_tag_list_text_missing_and_empty(tmp_path):
    (tmp_path / PROPERTIES_FILENAME).write_text("<properties><Test/></properties>")
    assert load_properties(tmp_path).tag_list_text() is None

    (tmp_path / PROPERTIES_FILENAME).write_text("<properties><Suites/></properties>")
    assert load_properties(tmp_path).tag_list_text() == ""


def test_load_properties_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="fitquery.properties.properties_file"):
        assert load_properties(tmp_path) is None
    assert any(record.levelno == logging.DEBUG for record in caplog.records)
    assert not any(record.levelno >= logging.WARNING for record in caplog.records)


def test_load_properties_malformed_file(tmp_path, caplog):
    (tmp_path / PROPERTIES_FILENAME).write_text("<properties><Test></properties>")
    with caplog.at_level(logging.WARNING, logger="fitquery.properties.properties_file"):
        assert load_properties(tmp_path) is None
    assert "unreadable properties file" in caplog.text


def test_load_properties_wrong_root_element(tmp_path, caplog):
    (tmp_path / PROPERTIES_FILENAME).write_text("<page><Test/></page>")
    with caplog.at_level(logging.WARNING, logger="fitquery.properties.properties_file"):
        assert load_properties(tmp_path) is None
    assert "<page>" in caplog.text


def test_load_properties_unreadable_file(tmp_path, caplog):
    # A directory in place of the file cannot be opened for reading
    (tmp_path / PROPERTIES_FILENAME).mkdir()
    with caplog.at_level(logging.WARNING, logger="fitquery.properties.properties_file"):
        assert load_properties(tmp_path) is None
    assert caplog.records


def test_new_record():
    record = PropertiesFile.new()
    assert record.root.tag == "properties"
    assert len(record.root) == 0
    assert record.tag_list_text() is None


def test_set_tag_list_creates_element():
    record = PropertiesFile.new()
    record.set_tag_list({"smoke", "Nightly", "fast"})
    assert record.tag_list_text() == "Nightly, fast, smoke"
    assert len(record.root.findall("Suites")) == 1


def test_set_tag_list_updates_element_in_place(page):
    record = load_properties(page)
    record.set_tag_list(["smoke", "nightly", "slow"])
    assert len(record.root.findall("Suites")) == 1
    assert record.tag_list_text() == "nightly, slow, smoke"


def test_save_properties_preserves_other_elements(page):
    record = load_properties(page)
    record.set_tag_list(["smoke", "nightly", "slow"])
    assert save_properties(page, record)

    reloaded = load_properties(page)
    assert reloaded.has_flag("Edit")
    assert reloaded.has_flag("Suite")
    assert reloaded.has_flag("Prune")
    assert reloaded.root.find("Edit").text == "true"
    assert parse_tag_list(reloaded.tag_list_text()) == {"smoke", "nightly", "slow"}


def test_save_properties_writes_declaration(tmp_path):
    assert save_properties(tmp_path, PropertiesFile.new())
    content = (tmp_path / PROPERTIES_FILENAME).read_text(encoding="utf-8")
    assert content.startswith("<?xml")
    assert ET.fromstring(content.split("?>", 1)[1].strip()).tag == "properties"


def test_save_properties_failure_is_logged_not_raised(tmp_path, caplog):
    missing_folder = tmp_path / "does_not_exist"
    with caplog.at_level(logging.ERROR, logger="fitquery.properties.properties_file"):
        assert save_properties(missing_folder, PropertiesFile.new()) is False
    assert "Failed to write properties file" in caplog.text
    assert not missing_folder.exists()


@pytest.mark.parametrize(
    "tag,expected",
    [
        (" smoke ", "smoke"),
        ("c++", "c++"),
        ("tab\tinside", "tab\tinside"),
        ("café", "café"),
        ("rocket \U0001f680", "rocket \U0001f680"),
    ],
)
def test_validate_tag_accepts_storable_tags(tag, expected):
    assert validate_tag(tag) == expected


@pytest.mark.parametrize("tag", ["", "  ", "a,b", "bell\x07", "nul\x00", "bad\ud800", "\udfff", "\ufffe", "\uffff"])
def test_validate_tag_rejects_unstorable_tags(tag):
    with pytest.raises(ValueError):
        validate_tag(tag)
