"""Java syntax tree access using tree-sitter.

Thin query layer over tree-sitter-java: node lookup by type, annotations
with their unnamed value or named pairs, type declarations with their
fields and methods, and method invocations with ordered arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import tree_sitter
import tree_sitter_java

from apigraph.core.errors import SyntaxTreeError

JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())

TYPE_DECLARATIONS = ("class_declaration", "interface_declaration", "record_declaration")
ANNOTATION_NODES = ("annotation", "marker_annotation")
COMMENT_NODES = ("line_comment", "block_comment")


@dataclass
class Annotation:
    """An annotation reduced to its simple name and arguments.

    @GetMapping            -> Annotation("GetMapping")
    @GetMapping("/pay")    -> Annotation("GetMapping", value="/pay")
    @FeignClient(name="x") -> Annotation("FeignClient", pairs={"name": "x"})
    """

    name: str
    value: str | None = None
    pairs: dict[str, str] = field(default_factory=dict)

    def argument(self, *keys: str) -> str | None:
        """First named argument among keys."""
        for key in keys:
            if key in self.pairs:
                return self.pairs[key]
        return None


def parse_java(source: bytes, file_path: str = "<memory>") -> tree_sitter.Tree:
    """Parse Java source.

    Raises:
        SyntaxTreeError: If the tree contains error or missing nodes.
    """
    parser = tree_sitter.Parser()
    parser.language = JAVA_LANGUAGE
    tree = parser.parse(source)
    if tree.root_node.has_error:
        raise SyntaxTreeError(file_path, _first_error_line(tree.root_node))
    return tree


def _first_error_line(node: tree_sitter.Node) -> int | None:
    for child in find_all(node, "ERROR"):
        return child.start_point[0] + 1
    return None


def find_all(node: tree_sitter.Node, *types: str) -> Iterator[tree_sitter.Node]:
    """Yield every descendant (and node itself) of the given types, pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in types:
            yield current
        stack.extend(reversed(current.children))


def node_text(node: tree_sitter.Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def simple_name(name: str) -> str:
    """'org.springframework.stereotype.Service' -> 'Service'."""
    return name.rsplit(".", 1)[-1].strip()


def string_literal_value(node: tree_sitter.Node, source: bytes) -> str | None:
    """Contents of a string literal without quotes, or None for other nodes."""
    if node.type != "string_literal":
        return None
    text = node_text(node, source)
    if text.startswith('"""') and text.endswith('"""') and len(text) >= 6:
        return text[3:-3]
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def element_value(node: tree_sitter.Node, source: bytes) -> str:
    """Render an annotation element value as plain text.

    String literals lose their quotes, arrays collapse to their first
    element, anything else (constants, enum refs) is the source text.
    """
    if node.type == "element_value_array_initializer":
        for child in node.named_children:
            if child.type not in COMMENT_NODES:
                return element_value(child, source)
        return ""

    literal = string_literal_value(node, source)
    if literal is not None:
        return literal
    return node_text(node, source).replace('"', "")


def parse_annotation(node: tree_sitter.Node, source: bytes) -> Annotation:
    """Build an Annotation from an annotation or marker_annotation node."""
    name_node = node.child_by_field_name("name")
    name = simple_name(node_text(name_node, source)) if name_node else ""
    annotation = Annotation(name=name)

    arguments = node.child_by_field_name("arguments")
    if arguments is None:
        return annotation

    for child in arguments.named_children:
        if child.type in COMMENT_NODES:
            continue
        if child.type == "element_value_pair":
            key = child.child_by_field_name("key")
            value = child.child_by_field_name("value")
            if key is not None and value is not None:
                annotation.pairs[node_text(key, source)] = element_value(value, source)
        elif annotation.value is None:
            annotation.value = element_value(child, source)

    return annotation


def modifiers_of(node: tree_sitter.Node) -> tree_sitter.Node | None:
    for child in node.children:
        if child.type == "modifiers":
            return child
    return None


def annotations_of(node: tree_sitter.Node, source: bytes) -> list[Annotation]:
    """Annotations declared directly on a type, field, method or parameter."""
    modifiers = modifiers_of(node)
    if modifiers is None:
        return []
    return [
        parse_annotation(child, source)
        for child in modifiers.children
        if child.type in ANNOTATION_NODES
    ]


def has_modifier(node: tree_sitter.Node, keyword: str) -> bool:
    """True if a keyword modifier such as 'final' or 'static' is present."""
    modifiers = modifiers_of(node)
    if modifiers is None:
        return False
    return any(child.type == keyword for child in modifiers.children)


def package_name(root: tree_sitter.Node, source: bytes) -> str:
    for child in root.children:
        if child.type == "package_declaration":
            for name in child.named_children:
                if name.type in ("identifier", "scoped_identifier"):
                    return node_text(name, source)
    return ""


def type_body_members(decl: tree_sitter.Node, *types: str) -> list[tree_sitter.Node]:
    """Direct members of a type declaration's body with the given node types."""
    body = decl.child_by_field_name("body")
    if body is None:
        return []
    return [child for child in body.named_children if child.type in types]


def enclosing_type(node: tree_sitter.Node) -> tree_sitter.Node | None:
    """Innermost type declaration containing the node."""
    parent = node.parent
    while parent is not None:
        if parent.type in TYPE_DECLARATIONS:
            return parent
        parent = parent.parent
    return None


def qualified_type_name(decl: tree_sitter.Node, source: bytes, package: str) -> str:
    """Fully-qualified id of a type declaration: package + class name."""
    name_node = decl.child_by_field_name("name")
    name = node_text(name_node, source) if name_node else ""
    return f"{package}.{name}" if package else name


def invocation_name(call: tree_sitter.Node, source: bytes) -> str:
    name = call.child_by_field_name("name")
    return node_text(name, source) if name else ""


def invocation_arguments(call: tree_sitter.Node) -> list[tree_sitter.Node]:
    """Ordered argument expressions of a method_invocation."""
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return []
    return [child for child in arguments.named_children if child.type not in COMMENT_NODES]


def parameter_types(method: tree_sitter.Node, source: bytes) -> list[str]:
    """Declared parameter types of a method, varargs rendered as 'T...'."""
    parameters = method.child_by_field_name("parameters")
    if parameters is None:
        return []

    types: list[str] = []
    for param in parameters.named_children:
        if param.type == "formal_parameter":
            type_node = param.child_by_field_name("type")
            if type_node is not None:
                types.append(node_text(type_node, source))
        elif param.type == "spread_parameter":
            for child in param.named_children:
                if child.type not in ("modifiers", "variable_declarator"):
                    types.append(node_text(child, source) + "...")
                    break
    return types
