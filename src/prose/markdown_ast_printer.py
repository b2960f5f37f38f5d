"""
Visitor class to print markdown AST structures for debugging
"""
from typing import List, Tuple

from prose.markdown_ast_node import (
    MarkdownASTBoldNode, MarkdownASTCodeBlockNode, MarkdownASTHeadingNode, MarkdownASTImageNode,
    MarkdownASTInlineCodeNode, MarkdownASTItalicNode, MarkdownASTLineNode, MarkdownASTLinkNode,
    MarkdownASTNode, MarkdownASTOrderedListNode, MarkdownASTPlaintextNode, MarkdownASTUnorderedListNode,
    MarkdownASTVisitor, MarkdownText
)


class MarkdownASTPrinter(MarkdownASTVisitor):
    """Visitor that formats the AST structure as an indented tree, one node per line."""
    def __init__(self) -> None:
        """Initialize the AST printer with zero indentation."""
        super().__init__()
        self.indent_level = 0
        self._lines: List[str] = []

    def format(self, node: MarkdownASTNode) -> str:
        """
        Format a node and everything beneath it.

        Args:
            node: The root of the tree to format

        Returns:
            The formatted tree, with a trailing newline
        """
        self.indent_level = 0
        self._lines = []
        self.visit(node)
        return "".join(f"{line}\n" for line in self._lines)

    def _emit(self, text: str) -> None:
        """Add a line at the current indentation."""
        self._lines.append(f"{'  ' * self.indent_level}{text}")

    def _emit_nested(self, label: str, text: MarkdownText) -> None:
        """Add a line, then the inline nodes beneath it one level deeper."""
        self._emit(label)
        self.indent_level += 1
        for child in text:
            self.visit(child)

        self.indent_level -= 1

    def generic_visit(self, node: MarkdownASTNode) -> None:
        """
        Default visit method that prints the node type and then its children.

        Args:
            node: The node to visit
        """
        name = node.__class__.__name__.removeprefix("MarkdownAST").removesuffix("Node")
        self._emit(name)
        self.indent_level += 1
        super().generic_visit(node)
        self.indent_level -= 1

    def visit_MarkdownASTHeadingNode(self, node: MarkdownASTHeadingNode) -> None:  # pylint: disable=invalid-name
        """
        Format a heading node and its inline text.

        Args:
            node: The heading node to format
        """
        self._emit_nested(f"Heading (level {node.level})", node.text)

    def visit_MarkdownASTLineNode(self, node: MarkdownASTLineNode) -> None:  # pylint: disable=invalid-name
        """
        Format a line node and its inline text.

        Args:
            node: The line node to format
        """
        if node.is_blank():
            self._emit("Line (blank)")
            return

        self._emit_nested("Line", node.text)

    def _visit_list(self, label: str, items: Tuple[MarkdownText, ...]) -> None:
        """
        Format a list heading line, then each item one level deeper.

        Args:
            label: Description of the list
            items: The text of each item, in source order
        """
        self._emit(label)
        self.indent_level += 1
        for item in items:
            self._emit_nested("Item", item)

        self.indent_level -= 1

    def visit_MarkdownASTUnorderedListNode(self, node: MarkdownASTUnorderedListNode) -> None:  # pylint: disable=invalid-name
        """
        Format an unordered list node and its items.

        Args:
            node: The unordered list node to format
        """
        self._visit_list(f"UnorderedList ({len(node.items)} items)", node.items)

    def visit_MarkdownASTOrderedListNode(self, node: MarkdownASTOrderedListNode) -> None:  # pylint: disable=invalid-name
        """
        Format an ordered list node and its items.

        Args:
            node: The ordered list node to format
        """
        self._visit_list(f"OrderedList ({len(node.items)} items)", node.items)

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> None:  # pylint: disable=invalid-name
        """
        Format a code block node with its language and body.

        Args:
            node: The code block node to format
        """
        self._emit(f"CodeBlock (language {node.language}): {node.content!r}")

    def visit_MarkdownASTPlaintextNode(self, node: MarkdownASTPlaintextNode) -> None:  # pylint: disable=invalid-name
        """
        Format a plain text node.

        Args:
            node: The plain text node to format
        """
        self._emit(f"Plaintext: {node.text!r}")

    def visit_MarkdownASTBoldNode(self, node: MarkdownASTBoldNode) -> None:  # pylint: disable=invalid-name
        """
        Format a bold node.

        Args:
            node: The bold node to format
        """
        self._emit(f"Bold: {node.text!r}")

    def visit_MarkdownASTItalicNode(self, node: MarkdownASTItalicNode) -> None:  # pylint: disable=invalid-name
        """
        Format an italic node.

        Args:
            node: The italic node to format
        """
        self._emit(f"Italic: {node.text!r}")

    def visit_MarkdownASTInlineCodeNode(self, node: MarkdownASTInlineCodeNode) -> None:  # pylint: disable=invalid-name
        """
        Format an inline code node.

        Args:
            node: The inline code node to format
        """
        self._emit(f"InlineCode: {node.text!r}")

    def visit_MarkdownASTLinkNode(self, node: MarkdownASTLinkNode) -> None:  # pylint: disable=invalid-name
        """
        Format a link node with its label and url.

        Args:
            node: The link node to format
        """
        self._emit(f"Link: {node.label!r} -> {node.url!r}")

    def visit_MarkdownASTImageNode(self, node: MarkdownASTImageNode) -> None:  # pylint: disable=invalid-name
        """
        Format an image node with its alt text and url.

        Args:
            node: The image node to format
        """
        self._emit(f"Image: {node.alt!r} -> {node.url!r}")
