# --- Output records ----------------------------------------------------------
# Each record serializes to a dict whose key order is the document's key order.
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class PackageRecord:
    name: str
    doc: Optional[str] = None  # omitted from the dict when None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.doc is not None:
            out["doc"] = self.doc
        return out


@dataclass(frozen=True)
class ReturnRecord:
    type: str
    doc: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type}
        if self.doc is not None:
            out["doc"] = self.doc
        return out


@dataclass(frozen=True)
class ArgumentRecord:
    name: str
    type: str
    doc: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.doc is not None:
            out["doc"] = self.doc
        return out


@dataclass(frozen=True)
class MethodRecord:
    """One documented method. `name` is the simple name, so overloads share it."""
    name: str
    doc: str
    returns: ReturnRecord
    arguments: list[ArgumentRecord] = field(default_factory=list)
    annotations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "doc": self.doc,
            "returns": self.returns.to_dict(),
            "arguments": [a.to_dict() for a in self.arguments],
            "annotations": list(self.annotations),
        }


@dataclass(frozen=True)
class ClassRecord:
    name: str
    doc: str
    superclass: Optional[str] = None
    interfaces: list[str] = field(default_factory=list)
    methods: list[MethodRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "doc": self.doc}
        if self.superclass is not None:
            out["superclass"] = self.superclass
        out["interfaces"] = list(self.interfaces)
        out["methods"] = [m.to_dict() for m in self.methods]
        return out


@dataclass(frozen=True)
class DocsDocument:
    """Root of the JSON document."""
    classes: list[ClassRecord] = field(default_factory=list)
    packages: list[PackageRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "classes": [c.to_dict() for c in self.classes],
            "packages": [p.to_dict() for p in self.packages],
        }
