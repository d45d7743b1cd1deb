import os
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger
from tree_sitter import Language, Node, Parser, Tree

from json_doclet.src.json_doclet.javadoc import parse_javadoc
from json_doclet.src.json_doclet.models.symbol_models import (
    DocComment,
    MethodSymbol,
    PackageSymbol,
    ParamSymbol,
    SymbolModel,
    TypeKind,
    TypeRef,
    TypeSymbol,
)
from json_doclet.src.json_doclet.tree_sitter_helpers import (
    child_of_type,
    children_of_type,
    node_point,
    node_text,
    preceding_comment,
)

TYPE_DECLARATIONS = (
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
    "annotation_type_declaration",
)
METHOD_DECLARATIONS = ("method_declaration", "annotation_type_element_declaration")
PRIMITIVE_TYPES = ("integral_type", "floating_point_type", "boolean_type")
ANNOTATIONS = ("marker_annotation", "annotation")
PACKAGE_INFO_FILE = "package-info.java"
ROOT_CLASS = "java.lang.Object"

# Implicitly imported, so simple names resolve without an import statement
JAVA_LANG_TYPES = {
    "AutoCloseable", "Boolean", "Byte", "CharSequence", "Character", "Class", "Cloneable",
    "Comparable", "Deprecated", "Double", "Enum", "Error", "Exception", "Float",
    "FunctionalInterface", "IllegalArgumentException", "IllegalStateException",
    "IndexOutOfBoundsException", "Integer", "Iterable", "Long", "Math", "Number",
    "NullPointerException", "Object", "Override", "Record", "Runnable", "RuntimeException",
    "SafeVarargs", "Short", "String", "StringBuilder", "SuppressWarnings", "System", "Thread",
    "Throwable", "UnsupportedOperationException", "Void",
}


# --- Tree-sitter language loading -------------------------------------------

def load_java_language() -> Language:
    """Loads the Tree-sitter Java grammar shipped as the `tree_sitter_java` wheel."""
    try:
        import tree_sitter_java
    except ImportError as e:
        raise RuntimeError(
            "Could not load Java grammar.\n"
            "- Install `tree-sitter-java` (pip install tree-sitter-java)."
        ) from e
    return Language(tree_sitter_java.language())


@dataclass
class _FileScope:
    """Name-resolution context for one compilation unit."""
    source_bytes: bytes
    package: Optional[str]
    imports: dict[str, str] = field(default_factory=dict)  # simple -> qualified
    local_types: dict[str, str] = field(default_factory=dict)  # simple -> qualified


# --- The Indexer -------------------------------------------------------------

class JavaSymbolIndexer:
    """
    Walks Tree-sitter Java ASTs and accumulates a SymbolModel:
    packages -> types -> methods -> parameters, each with its Javadoc.

    This is syntax-only: names are qualified from imports, same-file declarations
    and java.lang, without a classpath.
    """

    def __init__(self):
        self.language = load_java_language()
        self.parser = Parser(self.language)

        # In-memory index, in first-seen order
        self.packages: dict[str, Optional[DocComment]] = {}  # name -> package doc
        self.types: dict[str, TypeSymbol] = {}  # fqcn -> TypeSymbol

    def parse(self, source: str) -> Tree:
        return self.parser.parse(source.encode("utf-8"))

    def index_source(self, source: str, file_path: Optional[str] = None):
        """
        Parses & indexes a Java compilation unit.
        """
        source_bytes = source.encode("utf-8")
        root: Node = self.parse(source).root_node

        scope = _FileScope(source_bytes=source_bytes, package=None)
        package_node = child_of_type(root, "package_declaration")
        if package_node is not None:
            scope.package = self._package_name(source_bytes, package_node)
            doc = None
            if file_path is not None and os.path.basename(file_path) == PACKAGE_INFO_FILE:
                doc = self._doc_comment(source_bytes, package_node)
            self._register_package(scope.package, doc)

        scope.imports = self._single_type_imports(source_bytes, root)
        for decl in children_of_type(root, *TYPE_DECLARATIONS):
            self._collect_local_types(scope, decl, [])

        for decl in children_of_type(root, *TYPE_DECLARATIONS):
            self._index_type(scope, decl, [], frozenset())

        logger.debug(f"Indexed {file_path or '<source>'} (package {scope.package or '<unnamed>'})")

    def symbol_model(self) -> SymbolModel:
        """Snapshot of everything indexed so far."""
        return SymbolModel(
            packages=[PackageSymbol(qualified_name=name, doc_comment=doc) for name, doc in self.packages.items()],
            types=list(self.types.values()),
        )

    # -- Compilation-unit helpers -----------------------------------------------

    def _package_name(self, source_bytes: bytes, package_node: Node) -> str:
        name_node = child_of_type(package_node, "identifier", "scoped_identifier")
        return node_text(source_bytes, name_node)

    def _register_package(self, name: str, doc: Optional[DocComment]):
        # Any file can name the package; only package-info.java documents it
        if doc is not None or name not in self.packages:
            self.packages[name] = doc

    def _single_type_imports(self, source_bytes: bytes, root: Node) -> dict[str, str]:
        imports = {}
        for imp in children_of_type(root, "import_declaration"):
            # On-demand and static imports don't name a type we can map
            if child_of_type(imp, "asterisk", "static") is not None:
                continue
            name_node = child_of_type(imp, "identifier", "scoped_identifier")
            if name_node is not None:
                qualified = node_text(source_bytes, name_node)
                imports[qualified.rsplit(".", 1)[-1]] = qualified
        return imports

    def _collect_local_types(self, scope: _FileScope, node: Node, outer: list[str]):
        name = node_text(scope.source_bytes, node.child_by_field_name("name"))
        names = outer + [name]
        scope.local_types.setdefault(name, self._fqcn(scope.package, names))
        for member in self._members(node):
            if member.type in TYPE_DECLARATIONS:
                self._collect_local_types(scope, member, names)

    def _fqcn(self, pkg: Optional[str], class_names: list[str]) -> str:
        """Builds a fully-qualified class name from package + nested classes."""
        left = pkg + "." if pkg else ""
        return left + ".".join(class_names)

    def _doc_comment(self, source_bytes: bytes, node: Node) -> Optional[DocComment]:
        raw = preceding_comment(source_bytes, node)
        return parse_javadoc(raw) if raw is not None else None

    # -- Types --------------------------------------------------------------------

    def _members(self, node: Node) -> list[Node]:
        body = node.child_by_field_name("body")
        if body is None:
            return []
        members = []
        for child in body.named_children:
            # Enum members live after the constants, in their own node
            if child.type == "enum_body_declarations":
                members.extend(child.named_children)
            else:
                members.append(child)
        return members

    def _index_type(self, scope: _FileScope, node: Node, outer: list[str], type_vars: frozenset):
        src = scope.source_bytes
        simple = node_text(src, node.child_by_field_name("name"))
        names = outer + [simple]
        fqcn = self._fqcn(scope.package, names)
        type_vars = type_vars | self._type_parameters(src, node)

        superclass = None
        superclass_node = child_of_type(node, "superclass")
        if superclass_node is not None and superclass_node.named_children:
            superclass = self._type_ref(scope, superclass_node.named_children[-1], type_vars)
            # Written-out `extends Object` is the same as no extends clause
            if superclass.qualified_name == ROOT_CLASS:
                superclass = TypeRef(kind=TypeKind.NONE, text=superclass.text)

        interfaces = []
        # `implements` on classes/enums/records, `extends` on interfaces
        interfaces_node = child_of_type(node, "super_interfaces", "extends_interfaces")
        if interfaces_node is not None:
            type_list = child_of_type(interfaces_node, "type_list")
            if type_list is not None:
                interfaces = [self._type_ref(scope, t, type_vars) for t in type_list.named_children]

        members = self._members(node)
        methods = [
            self._method(scope, m, type_vars)
            for m in members
            if m.type in METHOD_DECLARATIONS
        ]

        if fqcn not in self.types:
            line, _ = node_point(node)
            logger.debug(f"Type {fqcn} at line {line + 1}: {len(methods)} methods")
            self.types[fqcn] = TypeSymbol(
                qualified_name=fqcn,
                simple_name=simple,
                superclass=superclass,
                interfaces=interfaces,
                methods=methods,
                doc_comment=self._doc_comment(src, node),
            )

        # Member types after their enclosing type
        for member in members:
            if member.type in TYPE_DECLARATIONS:
                self._index_type(scope, member, names, type_vars)

    def _type_parameters(self, source_bytes: bytes, node: Node) -> frozenset:
        params = node.child_by_field_name("type_parameters")
        if params is None:
            return frozenset()
        names = set()
        for param in children_of_type(params, "type_parameter"):
            ident = child_of_type(param, "type_identifier", "identifier")
            if ident is not None:
                names.add(node_text(source_bytes, ident))
        return frozenset(names)

    # -- Methods ------------------------------------------------------------------

    def _method(self, scope: _FileScope, node: Node, type_vars: frozenset) -> MethodSymbol:
        """
        Pulls out a method's name, return type, parameters, annotations and Javadoc.
        """
        src = scope.source_bytes
        type_vars = type_vars | self._type_parameters(src, node)

        return_type = self._type_ref(scope, node.child_by_field_name("type"), type_vars)
        params = []
        params_node = node.child_by_field_name("parameters")
        if params_node is not None:
            for p in params_node.named_children:
                param = self._parameter(scope, p, type_vars)
                if param is not None:
                    params.append(param)

        return MethodSymbol(
            name=node_text(src, node.child_by_field_name("name")),
            return_type=return_type,
            params=params,
            annotations=self._annotations(scope, node),
            doc_comment=self._doc_comment(src, node),
        )

    def _parameter(self, scope: _FileScope, node: Node, type_vars: frozenset) -> Optional[ParamSymbol]:
        src = scope.source_bytes
        if node.type == "formal_parameter":
            type_ref = self._type_ref(scope, node.child_by_field_name("type"), type_vars)
            # C-style `String args[]`
            dims = node.child_by_field_name("dimensions")
            if dims is not None:
                type_ref = TypeRef(kind=TypeKind.ARRAY, text=type_ref.text + "".join(node_text(src, dims).split()))
            return ParamSymbol(name=node_text(src, node.child_by_field_name("name")), type=type_ref)

        if node.type == "spread_parameter":
            type_node = next(
                c for c in node.named_children
                if c.type not in ("modifiers", "variable_declarator") + ANNOTATIONS
            )
            declarator = child_of_type(node, "variable_declarator")
            element = self._type_ref(scope, type_node, type_vars)
            return ParamSymbol(
                name=node_text(src, declarator.child_by_field_name("name")),
                type=TypeRef(kind=TypeKind.ARRAY, text=element.text + "..."),
            )

        # receiver parameters and comments aren't parameters
        return None

    def _annotations(self, scope: _FileScope, node: Node) -> list[str]:
        modifiers = child_of_type(node, "modifiers")
        if modifiers is None:
            return []
        names = []
        for annotation in children_of_type(modifiers, *ANNOTATIONS):
            name_node = annotation.child_by_field_name("name")
            name = node_text(scope.source_bytes, name_node)
            if name_node.type == "identifier":
                name = self._resolve(scope, name, frozenset())
            names.append(name)
        return names

    # -- Type references ------------------------------------------------------------

    def _type_ref(self, scope: _FileScope, node: Node, type_vars: frozenset) -> TypeRef:
        text = self._render(scope, node, type_vars)
        kind = node.type
        if kind == "annotated_type":
            node = node.named_children[-1]
            kind = node.type

        if kind == "void_type":
            return TypeRef(kind=TypeKind.VOID, text=text)
        if kind in PRIMITIVE_TYPES:
            return TypeRef(kind=TypeKind.PRIMITIVE, text=text)
        if kind == "array_type":
            return TypeRef(kind=TypeKind.ARRAY, text=text)
        if kind == "type_identifier" and node_text(scope.source_bytes, node) in type_vars:
            return TypeRef(kind=TypeKind.TYPEVAR, text=text)
        if kind == "generic_type":
            return TypeRef(kind=TypeKind.DECLARED, text=text,
                           qualified_name=self._render(scope, node.named_children[0], type_vars))
        if kind in ("type_identifier", "scoped_type_identifier"):
            return TypeRef(kind=TypeKind.DECLARED, text=text, qualified_name=text)
        return TypeRef(kind=TypeKind.ERROR, text=text)

    def _render(self, scope: _FileScope, node: Node, type_vars: frozenset) -> str:
        """
        Renders a type the way javac prints a TypeMirror: qualified names,
        type arguments joined by "," with no spaces.
        """
        src = scope.source_bytes
        kind = node.type

        if kind == "type_identifier":
            return self._resolve(scope, node_text(src, node), type_vars)
        if kind == "scoped_type_identifier":
            head, *rest = "".join(node_text(src, node).split()).split(".")
            return ".".join([self._resolve(scope, head, type_vars)] + rest)
        if kind == "generic_type":
            args = child_of_type(node, "type_arguments")
            rendered_args = self._render(scope, args, type_vars) if args is not None else ""
            return self._render(scope, node.named_children[0], type_vars) + rendered_args
        if kind == "type_arguments":
            return "<" + ",".join(self._render(scope, c, type_vars) for c in node.named_children) + ">"
        if kind == "array_type":
            element = self._render(scope, node.child_by_field_name("element"), type_vars)
            dims = node.child_by_field_name("dimensions")
            return element + ("".join(node_text(src, dims).split()) if dims is not None else "[]")
        if kind == "wildcard":
            bounds = [c for c in node.named_children if c.type not in ANNOTATIONS + ("super",)]
            if not bounds:
                return "?"
            keyword = "super" if child_of_type(node, "super") is not None else "extends"
            return f"? {keyword} {self._render(scope, bounds[-1], type_vars)}"
        if kind == "annotated_type":
            return self._render(scope, node.named_children[-1], type_vars)
        return " ".join(node_text(src, node).split())

    def _resolve(self, scope: _FileScope, name: str, type_vars: frozenset) -> str:
        if name in type_vars:
            return name
        if name in scope.local_types:
            return scope.local_types[name]
        if name in scope.imports:
            return scope.imports[name]
        if name in JAVA_LANG_TYPES:
            return "java.lang." + name
        return name
