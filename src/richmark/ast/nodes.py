#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/ast/nodes.py
"""AST node classes for Markdown document trees.

This module defines the node representation consumed by the renderer. A tree
is made of ``AstNode`` objects, each carrying a node *type* (an immutable
value describing the variant and its data) and a set of *links* to its
parent, children and siblings.

Node Hierarchy
--------------
Node types fall into two super-categories.

Block-level types occupy vertical layout space:
    - AstDocument, AstBlockQuote, AstUnorderedList, AstOrderedList
    - AstThematicBreak, AstHeading, AstIndentedCodeBlock, AstFencedCodeBlock
    - AstHtmlBlock, AstLinkReferenceDefinition, AstParagraph
    - AstTableRoot, AstTableHeader, AstTableBody, AstTableRow, AstTableCell
    - AstListItem, AstFootDefinition, AstFootReferenceDefinition

Inline types flow within a block's text:
    - AstText, AstCode, AstEmphasis, AstStrongEmphasis, AstStrikethrough
    - AstLink, AstImage, AstHtmlInline
    - AstHardLineBreak, AstSoftLineBreak, AstFootnoteReference

Children are stored as a singly-linked chain: a parent points to its first
child and every child points to its next sibling. ``last_child`` and
``previous`` are kept as well so chains can be appended to and walked in
reverse without rescanning.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

Alignment = Literal["left", "center", "right"]


class AstBlockNodeType:
    """Base class for block-level node types."""

    __slots__ = ()


class AstInlineNodeType:
    """Base class for inline node types."""

    __slots__ = ()


# Block-level node types


@dataclass(frozen=True)
class AstDocument(AstBlockNodeType):
    """Root of a document tree. Has no visual representation of its own."""


@dataclass(frozen=True)
class AstBlockQuote(AstBlockNodeType):
    """Block quote container."""


@dataclass(frozen=True)
class AstUnorderedList(AstBlockNodeType):
    """Bullet list container.

    Parameters
    ----------
    bullet_marker : str, default = "-"
        Marker character used in the source document

    """

    bullet_marker: str = "-"


@dataclass(frozen=True)
class AstOrderedList(AstBlockNodeType):
    """Numbered list container.

    Parameters
    ----------
    start_number : int, default = 1
        Number displayed for the first item
    delimiter : str, default = "."
        Delimiter following the number in the source document

    """

    start_number: int = 1
    delimiter: str = "."


@dataclass(frozen=True)
class AstThematicBreak(AstBlockNodeType):
    """Horizontal rule."""


@dataclass(frozen=True)
class AstHeading(AstBlockNodeType):
    """Heading whose children are inline content.

    Parameters
    ----------
    level : int
        Heading level from 1 to 6

    """

    level: int

    def __post_init__(self) -> None:
        """Validate the heading level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass(frozen=True)
class AstIndentedCodeBlock(AstBlockNodeType):
    """Code block introduced by indentation."""

    literal: str


@dataclass(frozen=True)
class AstFencedCodeBlock(AstBlockNodeType):
    """Code block delimited by fences.

    Parameters
    ----------
    literal : str
        Code content
    info : str, default = ""
        Info string following the opening fence
    fence_char : str, default = "`"
        Fence character
    fence_length : int, default = 3
        Number of fence characters

    """

    literal: str
    info: str = ""
    fence_char: str = "`"
    fence_length: int = 3


@dataclass(frozen=True)
class AstHtmlBlock(AstBlockNodeType):
    """Raw HTML block."""

    literal: str


@dataclass(frozen=True)
class AstLinkReferenceDefinition(AstBlockNodeType):
    """Link reference definition (``[label]: destination "title"``)."""

    label: str
    destination: str
    title: str = ""


@dataclass(frozen=True)
class AstParagraph(AstBlockNodeType):
    """Paragraph whose children are inline content.

    Parameters
    ----------
    fade_out_effect : bool, default = False
        Rendering hint passed through to the text sink, used for content that
        is still streaming in

    """

    fade_out_effect: bool = False


@dataclass(frozen=True)
class AstTableRoot(AstBlockNodeType):
    """Table container holding a header and a body."""


@dataclass(frozen=True)
class AstTableHeader(AstBlockNodeType):
    """Table header section holding rows."""


@dataclass(frozen=True)
class AstTableBody(AstBlockNodeType):
    """Table body section holding rows."""


@dataclass(frozen=True)
class AstTableRow(AstBlockNodeType):
    """Table row holding cells."""


@dataclass(frozen=True)
class AstTableCell(AstBlockNodeType):
    """Table cell whose children are inline content.

    Parameters
    ----------
    header : bool, default = False
        Whether this cell belongs to the header row
    alignment : {'left', 'center', 'right'} or None, default = None
        Column alignment

    """

    header: bool = False
    alignment: Optional[Alignment] = None


@dataclass(frozen=True)
class AstListItem(AstBlockNodeType):
    """List item holding block children."""


@dataclass(frozen=True)
class AstFootDefinition(AstBlockNodeType):
    """Footnote marker block carrying only its label."""

    label: str


@dataclass(frozen=True)
class AstFootReferenceDefinition(AstBlockNodeType):
    """Footnote definition carrying its label and block children."""

    label: str


# Inline node types


@dataclass(frozen=True)
class AstText(AstInlineNodeType):
    """Plain text run."""

    literal: str


@dataclass(frozen=True)
class AstCode(AstInlineNodeType):
    """Inline code span."""

    literal: str


@dataclass(frozen=True)
class AstEmphasis(AstInlineNodeType):
    """Emphasized (italic) content."""

    delimiter: str = "*"


@dataclass(frozen=True)
class AstStrongEmphasis(AstInlineNodeType):
    """Strongly emphasized (bold) content."""

    delimiter: str = "**"


@dataclass(frozen=True)
class AstStrikethrough(AstInlineNodeType):
    """Struck-through content."""


@dataclass(frozen=True)
class AstLink(AstInlineNodeType):
    """Hyperlink whose children are the link text."""

    destination: str
    title: str = ""


@dataclass(frozen=True)
class AstImage(AstInlineNodeType):
    """Image whose children are the alternative text."""

    destination: str
    title: str = ""


@dataclass(frozen=True)
class AstHtmlInline(AstInlineNodeType):
    """Raw inline HTML."""

    literal: str


@dataclass(frozen=True)
class AstHardLineBreak(AstInlineNodeType):
    """Forced line break."""


@dataclass(frozen=True)
class AstSoftLineBreak(AstInlineNodeType):
    """Line break in the source that renders as whitespace."""


@dataclass(frozen=True)
class AstFootnoteReference(AstInlineNodeType):
    """Reference to a footnote (``[^label]``)."""

    label: str


# Every concrete block type plus the inline category. Dispatch sites narrow
# over this union and end in a ``Never``-typed branch so a new block type fails type
# checking until each site handles it.
AstNodeType = Union[
    AstDocument,
    AstBlockQuote,
    AstUnorderedList,
    AstOrderedList,
    AstThematicBreak,
    AstHeading,
    AstIndentedCodeBlock,
    AstFencedCodeBlock,
    AstHtmlBlock,
    AstLinkReferenceDefinition,
    AstParagraph,
    AstTableRoot,
    AstTableHeader,
    AstTableBody,
    AstTableRow,
    AstTableCell,
    AstListItem,
    AstFootDefinition,
    AstFootReferenceDefinition,
    AstInlineNodeType,
]


@dataclass(eq=False)
class AstNodeLinks:
    """Structural links of a node inside its tree.

    Parameters
    ----------
    parent : AstNode or None
        Owning node
    first_child : AstNode or None
        Head of the child chain
    last_child : AstNode or None
        Tail of the child chain
    previous : AstNode or None
        Previous sibling
    next : AstNode or None
        Next sibling

    """

    parent: Optional[AstNode] = None
    first_child: Optional[AstNode] = None
    last_child: Optional[AstNode] = None
    previous: Optional[AstNode] = None
    next: Optional[AstNode] = None


@dataclass(eq=False)
class AstNode:
    """A node of the Markdown tree.

    Nodes compare by identity. The repr omits links to keep it finite.

    Parameters
    ----------
    type : AstNodeType
        Variant of this node and its associated data
    links : AstNodeLinks
        Parent, child and sibling links

    """

    type: AstNodeType
    links: AstNodeLinks = field(default_factory=AstNodeLinks, repr=False)

    @property
    def is_block(self) -> bool:
        return isinstance(self.type, AstBlockNodeType)

    @property
    def is_inline(self) -> bool:
        return isinstance(self.type, AstInlineNodeType)
