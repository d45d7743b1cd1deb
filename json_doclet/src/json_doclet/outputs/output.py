import json
from pathlib import Path

from loguru import logger

from json_doclet.src.json_doclet.config import DocletConfig
from json_doclet.src.json_doclet.models.doc_models import DocsDocument


class DocsWriteError(RuntimeError):
    """The documentation file could not be written."""


# --- JSON export -------------------------------------------------------------

def to_json(document: DocsDocument, indent: int = 2) -> str:
    """
    Serializes the document. Key order is the order the records build their
    dicts in, so the same document always produces the same text.
    """
    return json.dumps(document.to_dict(), indent=indent, ensure_ascii=False)


def write_docs(document: DocsDocument, config: DocletConfig) -> Path:
    """
    Writes the document to `config.output_path`, replacing any existing file.
    Failures are fatal: wrapped in DocsWriteError and raised, no retry.
    """
    path = Path(config.output_path)
    text = to_json(document, indent=config.indent)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        raise DocsWriteError(f"Could not write documentation to {path}") from e

    logger.info(f"Wrote {len(document.classes)} classes and {len(document.packages)} packages to {path}")
    return path
