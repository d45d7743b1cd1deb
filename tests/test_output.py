import json

import pytest

from json_doclet.src.json_doclet.compiler import compile_document
from json_doclet.src.json_doclet.config import DocletConfig
from json_doclet.src.json_doclet.models.doc_models import ClassRecord, DocsDocument, MethodRecord, ReturnRecord
from json_doclet.src.json_doclet.outputs.output import DocsWriteError, to_json, write_docs


def test_to_json_uses_two_space_indent(example_model):
    text = to_json(compile_document(example_model))
    lines = text.splitlines()
    assert lines[0] == "{"
    assert lines[1] == '  "classes": ['
    assert lines[2] == "    {"
    assert '"interfaces": []' in text
    assert not text.endswith("\n")


def test_to_json_is_idempotent(example_model):
    text = to_json(compile_document(example_model))
    assert json.dumps(json.loads(text), indent=2, ensure_ascii=False) == text


def test_to_json_custom_indent(example_model):
    text = to_json(compile_document(example_model), indent=4)
    assert text.splitlines()[1] == '    "classes": ['


def test_to_json_keeps_unicode_and_escapes_quotes():
    document = DocsDocument(
        classes=[
            ClassRecord(
                name="a.Über",
                doc='Says "héllo"\n',
                methods=[MethodRecord(name="m", doc="", returns=ReturnRecord(type="void"))],
            )
        ]
    )
    text = to_json(document)
    assert "a.Über" in text
    assert '"doc": "Says \\"héllo\\"\\n"' in text


def test_write_docs_overwrites(tmp_path, example_model, expected_example):
    out = tmp_path / "docs.json"
    out.write_text("stale", encoding="utf-8")

    path = write_docs(compile_document(example_model), DocletConfig(output_path=str(out)))

    assert path == out
    assert json.loads(out.read_text(encoding="utf-8")) == expected_example


def test_write_failure_is_wrapped(tmp_path, example_model):
    config = DocletConfig(output_path=str(tmp_path / "missing" / "docs.json"))
    with pytest.raises(DocsWriteError) as info:
        write_docs(compile_document(example_model), config)
    assert isinstance(info.value.__cause__, OSError)


def test_negative_indent_rejected():
    with pytest.raises(ValueError):
        DocletConfig(indent=-1)
