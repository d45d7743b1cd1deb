import pytest

from json_doclet.src.json_doclet.models.symbol_models import (
    DocComment,
    DocTag,
    MethodSymbol,
    PackageSymbol,
    ParamSymbol,
    SymbolModel,
    TypeKind,
    TypeRef,
    TypeSymbol,
)

INT = TypeRef(kind=TypeKind.PRIMITIVE, text="int")
VOID = TypeRef(kind=TypeKind.VOID, text="void")


@pytest.fixture
def bar_method() -> MethodSymbol:
    """`void bar(int x)` with `/** @param x the count @return nothing */`."""
    return MethodSymbol(
        name="bar",
        return_type=VOID,
        params=[ParamSymbol(name="x", type=INT)],
        doc_comment=DocComment(
            body=[],
            tags=[
                DocTag(kind="param", name="x", segments=["the count"]),
                DocTag(kind="return", segments=["nothing"]),
            ],
        ),
    )


@pytest.fixture
def example_model(bar_method: MethodSymbol) -> SymbolModel:
    """Package com.example documented, com.example.Foo with one method, and a marker type."""
    return SymbolModel(
        packages=[
            PackageSymbol(
                qualified_name="com.example",
                doc_comment=DocComment(body=["Example package."]),
            )
        ],
        types=[
            TypeSymbol(
                qualified_name="com.example.Foo",
                simple_name="Foo",
                methods=[bar_method],
            ),
            TypeSymbol(
                qualified_name="com.example.Marker",
                simple_name="Marker",
                doc_comment=DocComment(body=["No methods here."]),
            ),
        ],
    )


@pytest.fixture
def expected_example() -> dict:
    return {
        "classes": [
            {
                "name": "com.example.Foo",
                "doc": "",
                "interfaces": [],
                "methods": [
                    {
                        "name": "bar",
                        "doc": "",
                        "returns": {"type": "void", "doc": "nothing"},
                        "arguments": [{"name": "x", "type": "int", "doc": "the count"}],
                        "annotations": [],
                    }
                ],
            }
        ],
        "packages": [{"name": "com.example", "doc": "Example package."}],
    }
