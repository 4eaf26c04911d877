"""Core result types for simplemcp.

A tool result is an ordered sequence of content items. Only text content
exists today, but every item carries its kind so clients can dispatch on it.
"""

from dataclasses import dataclass, field
from typing import Any

CONTENT_TYPE_TEXT = "text"


@dataclass(frozen=True)
class Content:
    """One unit of a tool result.

    Attributes:
        text: The text body.
        type: Content kind tag. Always "text" for now.
    """

    text: str
    type: str = CONTENT_TYPE_TEXT

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """Result of executing a tool.

    Attributes:
        content: Ordered content items returned to the client.
    """

    content: tuple[Content, ...] = field(default_factory=tuple)

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        """Build a result holding a single text item."""
        return cls(content=(Content(text=text),))

    @property
    def text(self) -> str:
        """Concatenated text of all text items, newline separated."""
        return "\n".join(c.text for c in self.content if c.type == CONTENT_TYPE_TEXT)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the tools/call result shape."""
        return {"content": [c.to_dict() for c in self.content]}
