import json

import pytest

from excuse_engine.adapters.csv_adapter import dump as dump_csv
from excuse_engine.adapters.csv_adapter import parse as parse_csv
from excuse_engine.adapters.json_adapter import dump as dump_json
from excuse_engine.adapters.json_adapter import parse as parse_json

from conftest import make_excuse


def test_json_dump_and_parse(tmp_path):
    path = tmp_path / "saved.json"
    excuses = [make_excuse("a", score=80), make_excuse("b", score=55, category="medical", language="hi")]
    dump_json(excuses, str(path))
    loaded = parse_json(str(path))
    assert loaded == excuses


def test_json_parse_rejects_non_list(tmp_path):
    path = tmp_path / "saved.json"
    path.write_text(json.dumps({"id": "a"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_parse_names_bad_item(tmp_path):
    path = tmp_path / "saved.json"
    good = make_excuse("a").to_dict()
    bad = dict(good, id="b", believability_score=120)
    path.write_text(json.dumps([good, bad]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 2"):
        parse_json(str(path))


def test_json_parse_invalid_context(tmp_path):
    path = tmp_path / "saved.json"
    item = make_excuse("a").to_dict()
    item["context"]["urgency"] = "whenever"
    path.write_text(json.dumps([item]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        parse_json(str(path))


def test_csv_dump_and_parse(tmp_path):
    path = tmp_path / "saved.csv"
    excuses = [make_excuse("a", content="Line with, comma"), make_excuse("b", urgency="critical")]
    dump_csv(excuses, str(path))
    loaded = parse_csv(str(path))
    assert loaded == excuses


def test_csv_parse_minimal_row_uses_context_defaults(tmp_path):
    path = tmp_path / "saved.csv"
    path.write_text(
        "id,content,category,believability_score,situation,timestamp\n"
        "a,Flat tire,transport,70,transport,2025-01-01T09:00:00\n",
        encoding="utf-8",
    )
    excuses = parse_csv(str(path))
    assert len(excuses) == 1
    assert excuses[0].context.urgency == "medium"
    assert excuses[0].language == "en"


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "saved.csv"
    path.write_text(
        "id,content,category,believability_score,situation,timestamp\n"
        "a,Flat tire,transport,70,transport,bad\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_csv_parse_empty_file(tmp_path):
    path = tmp_path / "saved.csv"
    path.write_text("", encoding="utf-8")
    assert parse_csv(str(path)) == []


def test_json_parse_rejects_unknown_language_and_category_mismatch(tmp_path):
    path = tmp_path / "saved.json"
    foreign = dict(make_excuse("a").to_dict(), language="xx")
    path.write_text(json.dumps([foreign]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1: Invalid language"):
        parse_json(str(path))

    mismatched = dict(make_excuse("b").to_dict(), category="weather")
    path.write_text(json.dumps([make_excuse("a").to_dict(), mismatched]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 2: category 'weather'"):
        parse_json(str(path))


def test_csv_parse_rejects_unknown_category(tmp_path):
    path = tmp_path / "saved.csv"
    path.write_text(
        "id,content,category,believability_score,situation,timestamp\n"
        "a,Flat tire,transport,70,transport,2025-01-01T09:00:00\n"
        "b,Lost in orbit,space,70,space,2025-01-01T09:00:00\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="Row 3"):
        parse_csv(str(path))
