"""Unit tests for structured document loading."""

import pytest

from webcv.utils.documents import read_structured_document


@pytest.mark.unit
def test_reads_yaml_mapping(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text(
        "basics:\n  name: Jane Doe\nskills:\n  - name: Python\n    keywords: [pytest]\n",
        encoding="utf-8",
    )

    data = read_structured_document(path)

    assert data == {
        "basics": {"name": "Jane Doe"},
        "skills": [{"name": "Python", "keywords": ["pytest"]}],
    }
    assert isinstance(data, dict)


@pytest.mark.unit
def test_reads_json(tmp_path):
    path = tmp_path / "resume.json"
    path.write_text('{"basics": {"name": "Jane"}, "work": []}', encoding="utf-8")

    assert read_structured_document(path) == {"basics": {"name": "Jane"}, "work": []}


@pytest.mark.unit
def test_interpolation_syntax_left_as_text(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text("summary: 'Costs ${price} per hour'\n", encoding="utf-8")

    assert read_structured_document(path)["summary"] == "Costs ${price} per hour"


@pytest.mark.unit
def test_missing_document_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Input file not found"):
        read_structured_document(tmp_path / "resume.yaml")


@pytest.mark.unit
def test_invalid_yaml_raises_value_error(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text("basics: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Cannot parse"):
        read_structured_document(path)


@pytest.mark.unit
def test_unbalanced_interpolation_explains_fix(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text("summary: 'cost ${oops'\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Cannot parse") as exc_info:
        read_structured_document(path)

    assert "stray '${'" in str(exc_info.value)
