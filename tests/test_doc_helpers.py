from json_doclet.src.json_doclet.doc_helpers import annotation_names, doc_text, param_docs, return_doc
from json_doclet.src.json_doclet.models.symbol_models import DocComment, DocTag, MethodSymbol, TypeKind, TypeRef

VOID = TypeRef(kind=TypeKind.VOID, text="void")


def test_doc_text_without_comment_is_empty():
    assert doc_text(None) == ""


def test_doc_text_joins_body_segments_with_newlines():
    comment = DocComment(body=["Returns the ", "{@code x}", " value. "])
    assert doc_text(comment) == "Returns the \n{@code x}\n value. "


def test_param_docs_joins_and_trims():
    comment = DocComment(tags=[DocTag(kind="param", name="x", segments=[" the ", "{@code int}", " count "])])
    assert param_docs(comment) == {"x": "the  {@code int}  count"}


def test_param_docs_last_tag_wins():
    comment = DocComment(
        tags=[
            DocTag(kind="param", name="x", segments=["first"]),
            DocTag(kind="param", name="x", segments=["second"]),
        ]
    )
    assert param_docs(comment) == {"x": "second"}


def test_param_docs_ignores_other_tags():
    comment = DocComment(
        tags=[
            DocTag(kind="throws", segments=["IOException on failure"]),
            DocTag(kind="return", segments=["a value"]),
        ]
    )
    assert param_docs(comment) == {}
    assert param_docs(None) == {}


def test_return_doc_uses_first_tag_untrimmed():
    comment = DocComment(
        tags=[
            DocTag(kind="return", segments=["first ", "one"]),
            DocTag(kind="return", segments=["second"]),
        ]
    )
    assert return_doc(comment) == "first  one"


def test_return_doc_absent():
    assert return_doc(None) is None
    assert return_doc(DocComment(body=["text"])) is None


def test_annotation_names_keep_order_and_duplicates():
    method = MethodSymbol(
        name="m",
        return_type=VOID,
        annotations=["java.lang.Override", "com.example.Audit", "com.example.Audit"],
    )
    assert annotation_names(method) == ["java.lang.Override", "com.example.Audit", "com.example.Audit"]
