"""
Markdown AST visitor to render the AST as HTML.
"""

import html
from typing import Tuple

from prose.markdown_ast_node import (
    MarkdownASTBoldNode, MarkdownASTCodeBlockNode, MarkdownASTDocumentNode, MarkdownASTHeadingNode,
    MarkdownASTImageNode, MarkdownASTInlineCodeNode, MarkdownASTItalicNode, MarkdownASTLineNode,
    MarkdownASTLinkNode, MarkdownASTOrderedListNode, MarkdownASTPlaintextNode, MarkdownASTUnorderedListNode,
    MarkdownASTVisitor, MarkdownText
)


class MarkdownHTMLRenderer(MarkdownASTVisitor):
    """
    Visitor that renders the AST to HTML.

    Output is concatenated with no separators between nodes.  By default all
    text and attribute values are emitted exactly as written in the source;
    set escape_html to pass them through html.escape instead.
    """

    def __init__(self, escape_html: bool = False) -> None:
        """
        Initialize the renderer.

        Args:
            escape_html: Whether to HTML-escape user text and attribute values
        """
        super().__init__()
        self.escape_html = escape_html

    def _escape(self, text: str) -> str:
        """
        Apply the escaping policy to a piece of user text.

        Args:
            text: Text taken from the source document

        Returns:
            The text as it should appear in the HTML output
        """
        if not self.escape_html:
            return text

        return html.escape(text, quote=True)

    def render(self, node: MarkdownASTDocumentNode) -> str:
        """
        Render a whole document.

        Args:
            node: The document to render

        Returns:
            The HTML string
        """
        return self.visit(node)

    def render_text(self, text: MarkdownText) -> str:
        """
        Render a sequence of inline nodes.

        Args:
            text: The inline nodes to render

        Returns:
            The concatenated HTML of each node
        """
        return "".join(self.visit(child) for child in text)

    def visit_MarkdownASTDocumentNode(self, node: MarkdownASTDocumentNode) -> str:  # pylint: disable=invalid-name
        """
        Render a document node to HTML.

        Args:
            node: The document node to render

        Returns:
            The HTML of every block, in document order
        """
        return "".join(self.visit(block) for block in node.blocks)

    def visit_MarkdownASTBoldNode(self, node: MarkdownASTBoldNode) -> str:  # pylint: disable=invalid-name
        """
        Render a bold node to HTML.

        Args:
            node: The bold node to render

        Returns:
            The HTML string representation of the bold text
        """
        return f"<b>{self._escape(node.text)}</b>"

    def visit_MarkdownASTItalicNode(self, node: MarkdownASTItalicNode) -> str:  # pylint: disable=invalid-name
        """
        Render an italic node to HTML.

        Args:
            node: The italic node to render

        Returns:
            The HTML string representation of the italic text
        """
        return f"<i>{self._escape(node.text)}</i>"

    def visit_MarkdownASTInlineCodeNode(self, node: MarkdownASTInlineCodeNode) -> str:  # pylint: disable=invalid-name
        """
        Render an inline code node to HTML.

        Args:
            node: The inline code node to render

        Returns:
            The HTML string representation of the inline code
        """
        return f"<code>{self._escape(node.text)}</code>"

    def visit_MarkdownASTLinkNode(self, node: MarkdownASTLinkNode) -> str:  # pylint: disable=invalid-name
        """
        Render a link node to HTML.

        Args:
            node: The link node to render

        Returns:
            The HTML string representation of the link
        """
        return f"<a href=\"{self._escape(node.url)}\">{self._escape(node.label)}</a>"

    def visit_MarkdownASTImageNode(self, node: MarkdownASTImageNode) -> str:  # pylint: disable=invalid-name
        """
        Render an image node to HTML.

        Args:
            node: The image node to render

        Returns:
            The HTML string representation of the image
        """
        return f"<img src=\"{self._escape(node.url)}\" alt=\"{self._escape(node.alt)}\" />"

    def visit_MarkdownASTPlaintextNode(self, node: MarkdownASTPlaintextNode) -> str:  # pylint: disable=invalid-name
        """
        Render a plain text node to HTML.

        Args:
            node: The plain text node to render

        Returns:
            The text, escaped if escaping is enabled
        """
        return self._escape(node.text)

    def visit_MarkdownASTHeadingNode(self, node: MarkdownASTHeadingNode) -> str:  # pylint: disable=invalid-name
        """
        Render a heading node to HTML.

        The level is used as-is, so a level 7 heading renders as <h7>.

        Args:
            node: The heading node to render

        Returns:
            The HTML string representation of the heading
        """
        return f"<h{node.level}>{self.render_text(node.text)}</h{node.level}>"

    def _render_list_items(self, items: Tuple[MarkdownText, ...]) -> str:
        """
        Render each list item as an <li> element.

        Args:
            items: The text of each item, in source order

        Returns:
            The concatenated <li> elements
        """
        return "".join(f"<li>{self.render_text(item)}</li>" for item in items)

    def visit_MarkdownASTUnorderedListNode(self, node: MarkdownASTUnorderedListNode) -> str:  # pylint: disable=invalid-name
        """
        Render an unordered list node to HTML.

        Args:
            node: The unordered list node to render

        Returns:
            The HTML string representation of the list
        """
        return f"<ul>{self._render_list_items(node.items)}</ul>"

    def visit_MarkdownASTOrderedListNode(self, node: MarkdownASTOrderedListNode) -> str:  # pylint: disable=invalid-name
        """
        Render an ordered list node to HTML.

        Args:
            node: The ordered list node to render

        Returns:
            The HTML string representation of the list
        """
        return f"<ol>{self._render_list_items(node.items)}</ol>"

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> str:  # pylint: disable=invalid-name
        """
        Render a code block node to HTML.

        Args:
            node: The code block node to render

        Returns:
            The HTML string representation of the code block, body verbatim
        """
        language_class = f"lang-{self._escape(node.language)}"
        return f"<pre><code class=\"{language_class}\">{self._escape(node.content)}</code></pre>"

    def visit_MarkdownASTLineNode(self, node: MarkdownASTLineNode) -> str:  # pylint: disable=invalid-name
        """
        Render a line node to HTML.

        A line whose rendered text is empty produces no output at all, so
        blank lines do not become empty paragraphs.

        Args:
            node: The line node to render

        Returns:
            A <p> element, or an empty string
        """
        inner_html = self.render_text(node.text)
        if not inner_html:
            return ""

        return f"<p>{inner_html}</p>"
