from json_doclet.src.json_doclet.javadoc import parse_javadoc, split_segments
from json_doclet.src.json_doclet.models.symbol_models import DocTag


def test_single_line_tags():
    comment = parse_javadoc("/** @param x the count @return nothing */")
    assert comment.body == []
    assert comment.tags == [
        DocTag(kind="param", name="x", segments=["the count"]),
        DocTag(kind="return", segments=["nothing"]),
    ]


def test_multi_line_comment():
    raw = """/**
     * Adds two numbers.
     * Really.
     *
     * @param a first operand
     *        spanning lines
     * @param b second operand
     * @throws ArithmeticException never
     * @return the sum
     */"""
    comment = parse_javadoc(raw)
    assert comment.body == ["Adds two numbers.\nReally."]
    assert [(t.kind, t.name) for t in comment.tags] == [
        ("param", "a"),
        ("param", "b"),
        ("throws", None),
        ("return", None),
    ]
    assert comment.tags[0].segments == ["first operand\n       spanning lines"]
    assert comment.tags[3].segments == ["the sum"]


def test_inline_tags_split_body_and_do_not_start_block_tags():
    comment = parse_javadoc("/** Returns the {@code x} value, see {@link Foo#bar}. */")
    assert comment.body == ["Returns the ", "{@code x}", " value, see ", "{@link Foo#bar}", "."]
    assert comment.tags == []


def test_at_sign_inside_text_is_not_a_tag():
    comment = parse_javadoc("/** Mail admin@example.com or use @Override. */")
    assert comment.body == ["Mail admin@example.com or use @Override."]
    assert comment.tags == []


def test_unknown_tag_at_line_start():
    comment = parse_javadoc("/**\n * Body.\n * @custom thing\n */")
    assert comment.body == ["Body."]
    assert comment.tags == [DocTag(kind="custom", segments=["thing"])]


def test_not_a_doc_comment():
    assert parse_javadoc("/* plain */") is None
    assert parse_javadoc("/**/") is None


def test_empty_doc_comment():
    comment = parse_javadoc("/** */")
    assert comment.body == []
    assert comment.tags == []


def test_split_segments():
    assert split_segments("") == []
    assert split_segments("{@code {nested}} tail") == ["{@code {nested}}", " tail"]


def test_plain_brace_does_not_hide_block_tags():
    comment = parse_javadoc("/**\n * Opens a block with a { character.\n * @param x the x\n * @return the result\n */")
    assert comment.body == ["Opens a block with a { character."]
    assert [(t.kind, t.name) for t in comment.tags] == [("param", "x"), ("return", None)]
    assert comment.tags[0].segments == ["the x"]


def test_braces_inside_inline_tag_still_nest():
    comment = parse_javadoc("/** Use {@code if (a) { @return b; }} here.\n * @return c\n */")
    assert comment.tags == [DocTag(kind="return", segments=["c"])]
