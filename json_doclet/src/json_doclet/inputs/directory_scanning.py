# --- Directory scanning convenience -----------------------------------------
import os

from loguru import logger

from json_doclet.src.json_doclet.indexer import JavaSymbolIndexer


def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def index_directory(indexer: JavaSymbolIndexer, root_dir: str) -> int:
    """
    Recursively index all .java files in a directory, in sorted path order so
    the symbol model enumerates the same way on every machine.
    Returns the number of files indexed.
    """
    count = 0
    for dirpath, dirnames, filenames in os.walk(root_dir):
        dirnames.sort()
        for fn in sorted(filenames):
            if fn.endswith(".java"):
                full = os.path.join(dirpath, fn)
                try:
                    src = read_text(full)
                    indexer.index_source(src, full)
                    count += 1
                except Exception as e:
                    logger.warning(f"Failed to index {full}: {e}")
    return count
