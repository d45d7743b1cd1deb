# --- Symbol model: the read-only input the compiler consumes ----------------
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class TypeKind(str, Enum):
    """Coarse classification of a type reference."""
    DECLARED = "DECLARED"  # resolves to a class/interface/enum/record declaration
    NONE = "NONE"  # implicit absence of a type (e.g. no superclass)
    PRIMITIVE = "PRIMITIVE"
    ARRAY = "ARRAY"
    TYPEVAR = "TYPEVAR"
    VOID = "VOID"
    ERROR = "ERROR"


@dataclass(frozen=True)
class TypeRef:
    """A reference to a type as written on a declaration."""
    kind: TypeKind
    text: str  # rendering, e.g. "java.util.List<java.lang.String>", "int", "void"
    qualified_name: Optional[str] = None  # erasure for DECLARED refs, e.g. "java.util.List"


@dataclass(frozen=True)
class DocTag:
    """A block tag of a doc comment (@param, @return, @throws, ...)."""
    kind: str  # "param", "return", or the raw tag name
    segments: list[str] = field(default_factory=list)
    name: Optional[str] = None  # parameter name, only for "param" tags


@dataclass(frozen=True)
class DocComment:
    """Parsed doc comment: narrative body plus structured block tags."""
    body: list[str] = field(default_factory=list)
    tags: list[DocTag] = field(default_factory=list)


@dataclass(frozen=True)
class ParamSymbol:
    name: str
    type: TypeRef


@dataclass(frozen=True)
class MethodSymbol:
    name: str  # simple name, e.g. "bar"
    return_type: TypeRef
    params: list[ParamSymbol] = field(default_factory=list)
    annotations: list[str] = field(default_factory=list)  # qualified annotation type names
    doc_comment: Optional[DocComment] = None


@dataclass(frozen=True)
class TypeSymbol:
    qualified_name: str  # e.g. "com.example.Outer.Inner"
    simple_name: str
    superclass: Optional[TypeRef] = None
    interfaces: list[TypeRef] = field(default_factory=list)
    methods: list[MethodSymbol] = field(default_factory=list)  # declared directly, not inherited
    doc_comment: Optional[DocComment] = None


@dataclass(frozen=True)
class PackageSymbol:
    qualified_name: str
    doc_comment: Optional[DocComment] = None


Declaration = Union[PackageSymbol, TypeSymbol, MethodSymbol]


@dataclass(frozen=True)
class SymbolModel:
    """
    Fully resolved snapshot handed to the compiler. `packages` are the targeted
    packages and `types` the included type declarations, both in the order the
    provider enumerated them.
    """
    packages: list[PackageSymbol] = field(default_factory=list)
    types: list[TypeSymbol] = field(default_factory=list)

    def doc_comment_of(self, declaration: Declaration) -> Optional[DocComment]:
        """Doc comment attached to a declaration, or None."""
        return declaration.doc_comment
