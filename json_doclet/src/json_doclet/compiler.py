from typing import Optional

from loguru import logger

from json_doclet.src.json_doclet.config import DocletConfig
from json_doclet.src.json_doclet.doc_helpers import annotation_names, doc_text, param_docs, return_doc
from json_doclet.src.json_doclet.models.doc_models import (
    ArgumentRecord,
    ClassRecord,
    DocsDocument,
    MethodRecord,
    PackageRecord,
    ReturnRecord,
)
from json_doclet.src.json_doclet.models.symbol_models import (
    DocComment,
    MethodSymbol,
    SymbolModel,
    TypeKind,
    TypeRef,
    TypeSymbol,
)


# --- Document assembly -------------------------------------------------------

def compile_document(model: SymbolModel, config: Optional[DocletConfig] = None) -> DocsDocument:
    """
    Builds the whole document: classes first, then packages.
    Order is the provider's unless `config.sort_by_name` is set.
    """
    config = config or DocletConfig()
    classes = compile_classes(model)
    packages = compile_packages(model)

    if config.sort_by_name:
        classes = sorted(classes, key=lambda c: c.name)
        packages = sorted(packages, key=lambda p: p.name)

    logger.debug(f"Compiled {len(classes)} classes and {len(packages)} packages")
    return DocsDocument(classes=classes, packages=packages)


# --- Packages ----------------------------------------------------------------

def compile_packages(model: SymbolModel) -> list[PackageRecord]:
    records = []
    for package in model.packages:
        comment = doc_text(model.doc_comment_of(package))
        # Package doc is optional: only emitted when there is real text
        records.append(PackageRecord(
            name=package.qualified_name,
            doc=comment if comment.strip() else None,
        ))
    return records


# --- Classes -----------------------------------------------------------------

def compile_classes(model: SymbolModel) -> list[ClassRecord]:
    """Compiles every included type that declares at least one method."""
    return [compile_class(t, model) for t in model.types if t.methods]


def compile_class(type_symbol: TypeSymbol, model: SymbolModel) -> ClassRecord:
    logger.debug(f"Compiling {type_symbol.qualified_name} ({len(type_symbol.methods)} methods)")

    superclass = None
    if type_symbol.superclass is not None and type_symbol.superclass.kind == TypeKind.DECLARED:
        superclass = _declared_name(type_symbol.superclass)

    # Anything other than a declared type can't be named here, so it is skipped
    interfaces = [_declared_name(i) for i in type_symbol.interfaces if i.kind == TypeKind.DECLARED]

    return ClassRecord(
        name=type_symbol.qualified_name,
        doc=doc_text(model.doc_comment_of(type_symbol)),
        superclass=superclass,
        interfaces=interfaces,
        methods=[compile_method(m, model) for m in type_symbol.methods],
    )


def _declared_name(type_ref: TypeRef) -> str:
    if not type_ref.qualified_name:
        raise ValueError(f"Declared type reference {type_ref.text!r} has no qualified name")
    return type_ref.qualified_name


# --- Methods -----------------------------------------------------------------

def compile_method(method: MethodSymbol, model: SymbolModel) -> MethodRecord:
    comment = model.doc_comment_of(method)
    return MethodRecord(
        name=method.name,
        doc=doc_text(comment),
        returns=compile_return(method, comment),
        arguments=compile_arguments(method, comment),
        annotations=annotation_names(method),
    )


def compile_return(method: MethodSymbol, comment: Optional[DocComment]) -> ReturnRecord:
    doc = return_doc(comment)
    # Whitespace-only descriptions count as missing
    if doc is not None and not doc.strip():
        doc = None
    return ReturnRecord(type=method.return_type.text, doc=doc)


def compile_arguments(method: MethodSymbol, comment: Optional[DocComment]) -> list[ArgumentRecord]:
    tags = param_docs(comment)
    return [
        ArgumentRecord(
            name=param.name,
            type=param.type.text,
            doc=tags.get(param.name) or None,
        )
        for param in method.params
    ]
