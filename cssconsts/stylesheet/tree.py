"""Mutable stylesheet tree.

Only the shape the constant resolver needs: rules with a selector, at-rules
with a prelude, declarations with a mutable value, and comments. Every node
knows its parent so a declaration can detach itself.
"""

from typing import Callable, Iterable, List, Optional


INDENT = '  '


class Node:
    """Base class for every tree node."""

    def __init__(self, source_line: Optional[int] = None):
        self.parent: Optional['Container'] = None
        self.source_line = source_line

    def remove(self) -> None:
        """Detach this node from its parent. No-op for detached nodes."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def _lines(self, depth: int) -> List[str]:
        raise NotImplementedError


class Declaration(Node):
    """A `name: value` pair owned by exactly one rule."""

    def __init__(self, name: str, value: str, important: bool = False,
                 source_line: Optional[int] = None):
        super().__init__(source_line)
        self.name = name
        self.value = value
        self.important = important

    def __repr__(self) -> str:
        return f"<Declaration {self.name}: {self.value}>"

    def _lines(self, depth: int) -> List[str]:
        important = ' !important' if self.important else ''
        return [f"{INDENT * depth}{self.name}: {self.value}{important};"]


class Comment(Node):
    """A CSS comment, kept so output does not lose documentation."""

    def __init__(self, text: str, source_line: Optional[int] = None):
        super().__init__(source_line)
        self.text = text

    def _lines(self, depth: int) -> List[str]:
        return [f"{INDENT * depth}/*{self.text}*/"]


class Container(Node):
    """A node holding an ordered list of children."""

    def __init__(self, nodes: Optional[Iterable[Node]] = None,
                 source_line: Optional[int] = None):
        super().__init__(source_line)
        self.nodes: List[Node] = []
        for node in nodes or []:
            self.append(node)

    def append(self, node: Node) -> Node:
        node.remove()
        node.parent = self
        self.nodes.append(node)
        return node

    def remove_child(self, node: Node) -> None:
        # Identity match; two declarations may be textually equal
        for index, child in enumerate(self.nodes):
            if child is node:
                del self.nodes[index]
                node.parent = None
                return

    @property
    def declarations(self) -> List[Declaration]:
        """Immediate declarations in source order."""
        return [node for node in self.nodes if isinstance(node, Declaration)]

    def walk(self, callback: Callable[[Node], Optional[bool]]) -> bool:
        """
        Visit every descendant depth-first in source order.

        Args:
            callback: Called with each node. Returning ``False`` stops the
                whole walk; the node's children are not visited.

        Returns:
            False if the walk was stopped early, True otherwise
        """
        # Copy so callbacks may remove the node they are given
        for node in list(self.nodes):
            if callback(node) is False:
                return False
            if isinstance(node, Container) and node.walk(callback) is False:
                return False
        return True

    def walk_decls(self, callback: Callable[[Declaration], Optional[bool]]) -> bool:
        """Visit every descendant declaration. Same stop semantics as walk()."""
        def visit(node: Node) -> Optional[bool]:
            if isinstance(node, Declaration):
                return callback(node)
            return None

        return self.walk(visit)

    def _block_lines(self, header: str, depth: int) -> List[str]:
        pad = INDENT * depth
        if not self.nodes:
            return [f"{pad}{header} {{}}"]
        lines = [f"{pad}{header} {{"]
        for node in self.nodes:
            lines.extend(node._lines(depth + 1))
        lines.append(f"{pad}}}")
        return lines


class Rule(Container):
    """A style rule: selector plus block."""

    def __init__(self, selector: str, nodes: Optional[Iterable[Node]] = None,
                 source_line: Optional[int] = None):
        super().__init__(nodes, source_line)
        self.selector = selector

    def __repr__(self) -> str:
        return f"<Rule {self.selector}>"

    def _lines(self, depth: int) -> List[str]:
        return self._block_lines(self.selector, depth)


class AtRule(Container):
    """An at-rule. ``has_block`` is False for statement at-rules like @import."""

    def __init__(self, name: str, params: str = '',
                 nodes: Optional[Iterable[Node]] = None, has_block: bool = True,
                 source_line: Optional[int] = None):
        super().__init__(nodes, source_line)
        self.name = name
        self.params = params
        self.has_block = has_block

    def __repr__(self) -> str:
        return f"<AtRule @{self.name} {self.params}>"

    def _lines(self, depth: int) -> List[str]:
        header = f"@{self.name} {self.params}" if self.params else f"@{self.name}"
        if not self.has_block:
            return [f"{INDENT * depth}{header};"]
        return self._block_lines(header, depth)


class Stylesheet(Container):
    """Root of a parsed stylesheet."""

    def __init__(self, nodes: Optional[Iterable[Node]] = None, source: Optional[str] = None):
        super().__init__(nodes)
        self.source = source

    def to_css(self) -> str:
        """Serialize the tree. Top-level nodes are separated by a blank line."""
        if not self.nodes:
            return ''
        blocks = ['\n'.join(node._lines(0)) for node in self.nodes]
        return '\n\n'.join(blocks) + '\n'
