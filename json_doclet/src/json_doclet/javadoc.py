# --- Javadoc parsing ---------------------------------------------------------
"""
Turns the raw text of a `/** ... */` comment into a DocComment.

The body becomes a list of segments: plain text runs and inline tags such as
`{@code x}`, kept in source order. Everything from the first block tag on is
split into DocTags. A block tag starts at the beginning of a line, or
mid-line for the well-known tag names (`/** @param x the count @return nothing */`
yields two tags).
"""

import re
from typing import Optional

from json_doclet.src.json_doclet.models.symbol_models import DocComment, DocTag

KNOWN_BLOCK_TAGS = {
    "param", "return", "throws", "exception", "see", "since", "author", "version",
    "deprecated", "serial", "serialData", "serialField", "hidden", "apiNote",
    "implSpec", "implNote", "provides", "uses",
}

_TAG_NAME = re.compile(r"[A-Za-z][\w.-]*")


def is_javadoc(raw: str) -> bool:
    # "/**/" is an empty ordinary comment, not a doc comment
    return raw.startswith("/**") and raw != "/**/"


def parse_javadoc(raw: str) -> Optional[DocComment]:
    """Parses a raw doc comment. Returns None for anything that isn't one."""
    if not is_javadoc(raw):
        return None

    text = _strip_decoration(raw)
    starts = _block_tag_starts(text)
    body_end = starts[0][0] if starts else len(text)

    tags = []
    for i, (start, name) in enumerate(starts):
        end = starts[i + 1][0] if i + 1 < len(starts) else len(text)
        content = text[start + 1 + len(name):end].strip()
        tags.append(_make_tag(name, content))

    return DocComment(body=split_segments(text[:body_end].strip()), tags=tags)


def split_segments(text: str) -> list[str]:
    """
    Splits text into plain runs and inline `{@...}` tags. Empty runs are dropped,
    so "" gives [].
    """
    segments = []
    pos = 0
    while pos < len(text):
        start = text.find("{@", pos)
        if start < 0:
            segments.append(text[pos:])
            break
        if start > pos:
            segments.append(text[pos:start])
        end = _matching_brace(text, start)
        segments.append(text[start:end])
        pos = end
    return [s for s in segments if s]


# -- helpers -----------------------------------------------------------------

def _strip_decoration(raw: str) -> str:
    """Drops /**, */ and the leading `*` of each line (plus one space after it)."""
    inner = raw[3:]
    if inner.endswith("*/"):
        inner = inner[:-2]

    lines = []
    for line in inner.split("\n"):
        line = line.rstrip()
        stripped = line.lstrip()
        if stripped.startswith("*"):
            stripped = stripped[1:]
            if stripped.startswith(" "):
                stripped = stripped[1:]
            line = stripped
        lines.append(line)
    return "\n".join(lines)


def _block_tag_starts(text: str) -> list[tuple[int, str]]:
    """(offset of '@', tag name) for every block tag outside inline tags."""
    starts = []
    depth = 0
    for i, ch in enumerate(text):
        # Only `{@` opens an inline tag; plain braces count once inside one
        if ch == "{" and (depth or text.startswith("{@", i)):
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
        elif ch == "@" and depth == 0 and (i == 0 or text[i - 1].isspace()):
            m = _TAG_NAME.match(text, i + 1)
            if m is None:
                continue
            line_start = text.rfind("\n", 0, i) + 1
            if not text[line_start:i].strip() or m.group(0) in KNOWN_BLOCK_TAGS:
                starts.append((i, m.group(0)))
    return starts


def _make_tag(name: str, content: str) -> DocTag:
    if name == "param":
        parts = content.split(None, 1)
        param_name = parts[0] if parts else ""
        description = parts[1] if len(parts) > 1 else ""
        return DocTag(kind="param", name=param_name, segments=split_segments(description))
    return DocTag(kind=name, segments=split_segments(content))


def _matching_brace(text: str, start: int) -> int:
    """Offset just past the brace closing the one at `start` (or end of text)."""
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return len(text)
