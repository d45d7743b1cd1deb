# --- Doc comment plumbing ----------------------------------------------------
from typing import Optional

from json_doclet.src.json_doclet.models.symbol_models import DocComment, MethodSymbol

PARAM_TAG = "param"
RETURN_TAG = "return"


def doc_text(comment: Optional[DocComment]) -> str:
    """
    Narrative body of a doc comment, segments joined by newlines.
    Returns "" when there is no comment. No trimming here; callers that test
    for emptiness trim first.
    """
    if comment is None:
        return ""
    return "\n".join(comment.body)


def param_docs(comment: Optional[DocComment]) -> dict[str, str]:
    """
    Maps parameter name -> trimmed @param description.
    Duplicate tags for the same name: the last one wins.
    """
    docs: dict[str, str] = {}
    if comment is None:
        return docs
    for tag in comment.tags:
        if tag.kind == PARAM_TAG and tag.name is not None:
            docs[tag.name] = " ".join(tag.segments).strip()
    return docs


def return_doc(comment: Optional[DocComment]) -> Optional[str]:
    """First @return description in source order (joined, untrimmed), or None."""
    if comment is None:
        return None
    for tag in comment.tags:
        if tag.kind == RETURN_TAG:
            return " ".join(tag.segments)
    return None


def annotation_names(method: MethodSymbol) -> list[str]:
    """Qualified annotation type names, as the provider reported them."""
    return list(method.annotations)
