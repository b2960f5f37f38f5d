"""
AST node types for the prose markdown dialect.

A document is an ordered sequence of block nodes.  Block nodes carry their
text as a tuple of inline nodes.  Every node is immutable once built and owns
its children exclusively, so the tree has no parent links and no sharing.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple, Union


# Language recorded for a fenced code block that has no language tag
UNKNOWN_LANGUAGE = "__UNKNOWN__"


class MarkdownASTNode:
    """Base class for all markdown AST nodes."""

    def children(self) -> List['MarkdownASTNode']:
        """
        Get the child nodes of this node, in source order.

        Returns:
            A list of child nodes (empty for leaf nodes)
        """
        return []


class MarkdownASTVisitor:
    """
    Base visitor class for markdown AST traversal.

    Dispatches each node to a `visit_<ClassName>` method, or to
    `generic_visit` if the subclass does not define one.
    """

    def visit(self, node: MarkdownASTNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        results = []
        for child in node.children():
            results.append(self.visit(child))

        return results


@dataclass(frozen=True)
class MarkdownASTBoldNode(MarkdownASTNode):
    """Node representing bold text (<b>)."""
    text: str


@dataclass(frozen=True)
class MarkdownASTItalicNode(MarkdownASTNode):
    """Node representing italic text (<i>)."""
    text: str


@dataclass(frozen=True)
class MarkdownASTInlineCodeNode(MarkdownASTNode):
    """Node representing inline code (<code>)."""
    text: str


@dataclass(frozen=True)
class MarkdownASTLinkNode(MarkdownASTNode):
    """Node representing a link (<a>)."""
    label: str
    url: str


@dataclass(frozen=True)
class MarkdownASTImageNode(MarkdownASTNode):
    """Node representing an image (<img>)."""
    alt: str
    url: str


@dataclass(frozen=True)
class MarkdownASTPlaintextNode(MarkdownASTNode):
    """Node representing a maximal run of unstyled text."""
    text: str


MarkdownInline = Union[
    MarkdownASTBoldNode,
    MarkdownASTItalicNode,
    MarkdownASTInlineCodeNode,
    MarkdownASTLinkNode,
    MarkdownASTImageNode,
    MarkdownASTPlaintextNode
]

# One line of inline content, in source order
MarkdownText = Tuple[MarkdownInline, ...]


@dataclass(frozen=True)
class MarkdownASTHeadingNode(MarkdownASTNode):
    """
    Node representing a heading.

    The level is the number of leading '#' characters and is not clamped, so
    levels above 6 are valid.
    """
    level: int
    text: MarkdownText = ()

    def children(self) -> List[MarkdownASTNode]:
        return list(self.text)


@dataclass(frozen=True)
class MarkdownASTOrderedListNode(MarkdownASTNode):
    """Node representing an ordered list (<ol>); each item is one line of text."""
    items: Tuple[MarkdownText, ...]

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("An ordered list must have at least one item")


@dataclass(frozen=True)
class MarkdownASTUnorderedListNode(MarkdownASTNode):
    """Node representing an unordered list (<ul>); each item is one line of text."""
    items: Tuple[MarkdownText, ...]

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("An unordered list must have at least one item")


@dataclass(frozen=True)
class MarkdownASTCodeBlockNode(MarkdownASTNode):
    """Node representing a fenced code block (<pre><code>)."""
    language: str
    content: str


@dataclass(frozen=True)
class MarkdownASTLineNode(MarkdownASTNode):
    """
    Node representing one source line outside any other block.

    A line with inline content is a paragraph.  A line with no inline content
    is a blank line.
    """
    text: MarkdownText = ()

    def is_blank(self) -> bool:
        """
        Check whether this line came from a bare line terminator.

        Returns:
            True if the line has no inline content
        """
        return not self.text

    def children(self) -> List[MarkdownASTNode]:
        return list(self.text)


MarkdownBlock = Union[
    MarkdownASTHeadingNode,
    MarkdownASTOrderedListNode,
    MarkdownASTUnorderedListNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTLineNode
]


@dataclass(frozen=True)
class MarkdownASTDocumentNode(MarkdownASTNode):
    """Root node holding the blocks of a whole document, in source order."""
    blocks: Tuple[MarkdownBlock, ...]

    def children(self) -> List[MarkdownASTNode]:
        return list(self.blocks)
