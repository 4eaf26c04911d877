"""Readable plain-text extraction from HTML.

The extractor approximates what a reader sees on a page, not how a browser
lays it out:

1. The source is parsed permissively (BeautifulSoup with the lxml builder)
   and copied into a DomTree arena. Content outside any <body> tag lands in
   an implied <body>; head content stays in <head>.
2. The title is the text of the first <title> element.
3. Text is collected from the main content region: the first <main> or
   <article>, else <body>, else the whole document.
4. Non-content tags (scripts, navigation, forms, media, ...) are skipped with
   everything beneath them. Block tags start and end a line. Text directly
   inside an <li> gets a bullet.
5. Lines are trimmed and whitespace runs collapsed, then the result is capped
   at a maximum length.

Extraction never raises. Markup that cannot be parsed at all is returned
unchanged as the extracted text.

Example:
    page = extract_page("<html><title>Hi</title><body><p>Hello</p></body></html>")
    page.title  # "Hi"
    page.text   # "Hello"
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

logger = logging.getLogger(__name__)

NO_TITLE = "No title"

DEFAULT_MAX_LENGTH = 10000

TRUNCATION_NOTICE = "\n\n[Content truncated...]"

BULLET = "• "

# Tags skipped together with their whole subtree
SKIP_TAGS: frozenset[str] = frozenset({
    # Scripts and styles
    "script", "style", "noscript",
    # Page chrome
    "nav", "header", "footer", "aside", "menu", "menuitem",
    # Interactive controls
    "button", "form", "input", "select", "textarea", "label",
    # Embedded and media content
    "iframe", "object", "embed", "svg", "canvas", "map", "area",
    "audio", "video", "track", "source", "picture",
    # Metadata
    "meta", "link", "base",
    # Void formatting
    "br", "hr", "wbr",
    # Templating
    "dialog", "template", "slot",
})

# Tags whose content starts and ends on its own line
BLOCK_TAGS: frozenset[str] = frozenset({
    "p", "div",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "li", "section", "article", "main",
    "blockquote", "pre", "address", "figcaption",
    "dt", "dd", "tr", "td", "th",
})

LIST_ITEM_TAGS: frozenset[str] = frozenset({"li"})

# Content region candidates, in order of preference
MAIN_CONTENT_TAGS: frozenset[str] = frozenset({"main", "article"})


class NodeKind(Enum):
    """Kind of a DOM node."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"


@dataclass
class DomNode:
    """A node in a DomTree.

    Attributes:
        kind: Document, element, or text.
        tag: Lowercase tag name (elements only).
        data: Text content (text nodes only).
        parent: Index of the parent node, None for the document.
        children: Indices of child nodes in document order.
    """

    kind: NodeKind
    tag: str = ""
    data: str = ""
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    def is_element(self, tags: frozenset[str]) -> bool:
        """Return True if this is an element whose tag is in tags."""
        return self.kind is NodeKind.ELEMENT and self.tag in tags


class DomTree:
    """Arena of DOM nodes addressed by integer index.

    Parent links are plain indices into the arena, so the tree holds no
    reference cycles. Index 0 is always the document node.
    """

    ROOT = 0

    def __init__(self) -> None:
        self.nodes: list[DomNode] = [DomNode(NodeKind.DOCUMENT)]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> DomNode:
        return self.nodes[index]

    def add_element(self, parent: int, tag: str) -> int:
        """Append an element under parent and return its index."""
        return self._append(parent, DomNode(NodeKind.ELEMENT, tag=tag.lower()))

    def add_text(self, parent: int, data: str) -> int:
        """Append a text node under parent and return its index."""
        return self._append(parent, DomNode(NodeKind.TEXT, data=data))

    def _append(self, parent: int, node: DomNode) -> int:
        index = len(self.nodes)
        node.parent = parent
        self.nodes.append(node)
        self.nodes[parent].children.append(index)
        return index

    def parent_of(self, index: int) -> DomNode | None:
        """Return the parent node, or None for the document."""
        parent = self.nodes[index].parent
        return None if parent is None else self.nodes[parent]

    def iter_preorder(self, start: int = ROOT) -> Iterator[int]:
        """Yield node indices depth-first, in document order."""
        stack = [start]
        while stack:
            index = stack.pop()
            yield index
            stack.extend(reversed(self.nodes[index].children))

    def find_first(self, tags: frozenset[str], start: int = ROOT) -> int | None:
        """Return the first element (depth-first) whose tag is in tags."""
        for index in self.iter_preorder(start):
            if self.nodes[index].is_element(tags):
                return index
        return None


@dataclass(frozen=True)
class ExtractedPage:
    """Title and readable text of an HTML page."""

    title: str
    text: str


def _is_text(element: PageElement) -> bool:
    # Comments, doctypes, CDATA and processing instructions are not page text
    return isinstance(element, NavigableString) and not isinstance(element, PreformattedString)


def build_tree(soup: BeautifulSoup) -> DomTree:
    """Copy a parsed BeautifulSoup document into a DomTree."""
    tree = DomTree()
    stack: list[tuple[Tag, int]] = [(soup, DomTree.ROOT)]
    while stack:
        source, parent = stack.pop()
        for child in source.children:
            if isinstance(child, Tag):
                stack.append((child, tree.add_element(parent, child.name)))
            elif _is_text(child):
                tree.add_text(parent, str(child))
    return tree


def parse_html(source: str) -> DomTree | None:
    """Parse HTML into a DomTree.

    Returns:
        The tree, or None if the parser rejected the input outright.
    """
    try:
        with warnings.catch_warnings():
            # Plain text that looks like a URL or file name is still valid input
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(source, "lxml")
    except Exception as e:
        logger.debug("HTML parsing failed: %s", e)
        return None
    return build_tree(soup)


def find_title(tree: DomTree) -> str:
    """Return the stripped text of the first <title>, or NO_TITLE."""
    for index in tree.iter_preorder():
        node = tree[index]
        if node.kind is NodeKind.ELEMENT and node.tag == "title" and node.children:
            first = tree[node.children[0]]
            if first.kind is NodeKind.TEXT:
                return first.data.strip() or NO_TITLE
    return NO_TITLE


def find_content_root(tree: DomTree) -> int:
    """Return the index of the main content region.

    Preference: first <main> or <article>, then <body>, then the document.
    """
    main = tree.find_first(MAIN_CONTENT_TAGS)
    if main is not None:
        return main
    body = tree.find_first(frozenset({"body"}))
    if body is not None:
        return body
    return DomTree.ROOT


class _TextBuffer:
    """Accumulates extracted text and tracks whether a line is open."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._at_line_start = True

    def write(self, text: str) -> None:
        self._parts.append(text)
        self._at_line_start = False

    def break_line(self) -> None:
        # No break on an empty buffer, never two in a row
        if self._parts and not self._at_line_start:
            self._parts.append("\n")
            self._at_line_start = True

    def getvalue(self) -> str:
        return "".join(self._parts)


def collect_text(tree: DomTree, root: int) -> str:
    """Walk the subtree at root and return the raw, unnormalized text."""
    buffer = _TextBuffer()
    # (index, leaving) pairs; leaving marks the end of a block element
    stack: list[tuple[int, bool]] = [(root, False)]

    while stack:
        index, leaving = stack.pop()
        if leaving:
            buffer.break_line()
            continue

        node = tree[index]

        if node.is_element(SKIP_TAGS):
            continue

        if node.kind is NodeKind.TEXT:
            text = node.data.strip()
            if text:
                parent = tree.parent_of(index)
                if parent is not None and parent.is_element(LIST_ITEM_TAGS):
                    buffer.write(BULLET)
                buffer.write(text)
                buffer.write(" ")
            continue

        if node.is_element(BLOCK_TAGS):
            buffer.break_line()
            stack.append((index, True))

        stack.extend((child, False) for child in reversed(node.children))

    return buffer.getvalue()


def normalize_lines(text: str) -> str:
    """Trim lines, collapse whitespace runs, and squeeze blank lines.

    A blank line survives only directly after a non-blank line, so
    paragraphs stay separated by at most one blank line. Leading and
    trailing blank lines are dropped.
    """
    lines: list[str] = []
    for raw in text.split("\n"):
        line = " ".join(raw.split())
        if line or (lines and lines[-1]):
            lines.append(line)

    while lines and not lines[-1]:
        lines.pop()

    return "\n".join(lines)


def truncate(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Cap text at max_length characters, appending a notice if cut."""
    if len(text) > max_length:
        return text[:max_length] + TRUNCATION_NOTICE
    return text


def extract_page(source: str, max_length: int = DEFAULT_MAX_LENGTH) -> ExtractedPage:
    """Extract the title and readable text of an HTML document.

    Args:
        source: Raw HTML.
        max_length: Maximum length of the extracted text before truncation.

    Returns:
        The page title (or NO_TITLE) and its normalized text. If the source
        cannot be parsed, the text is the source itself.
    """
    tree = parse_html(source)
    if tree is None:
        return ExtractedPage(title=NO_TITLE, text=source)

    raw = collect_text(tree, find_content_root(tree))
    return ExtractedPage(
        title=find_title(tree),
        text=truncate(normalize_lines(raw), max_length),
    )


def extract_title(source: str) -> str:
    """Return the page title of an HTML document, or NO_TITLE."""
    tree = parse_html(source)
    if tree is None:
        return NO_TITLE
    return find_title(tree)


def extract_text(source: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Return the readable text of an HTML document."""
    return extract_page(source, max_length).text
