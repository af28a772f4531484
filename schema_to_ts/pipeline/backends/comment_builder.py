"""
Documentation comment builder for generated TypeScript members.
"""

from __future__ import annotations

import re

from ..config import CommentStyle

TITLE_MARKER = "[title]"
REQUIRED_MARKER = "[required]"
DEPRECATED_MARKER = "[deprecated]"

_TITLE_PATTERN = re.compile(r"\[title\](.*)", re.DOTALL)

# Markers replaced verbatim in block comments
BLOCK_TAGS = {DEPRECATED_MARKER: "@deprecated"}

# A literal "*/" would close the JSDoc comment early
BLOCK_END = "*/"
BLOCK_END_ESCAPED = "*\\/"


class CommentBuilder:
    """
    Accumulates comment fragments and renders them as one comment.

    Line style emits every fragment as `// ...` lines, markers included.
    Block style emits a JSDoc comment where `[title] X` becomes a heading
    followed by a `---` rule and `[deprecated]` becomes `@deprecated`.

    Fragments are rendered in the order they were added.
    """

    def __init__(self, style: CommentStyle | str = CommentStyle.LINE):
        self.style = CommentStyle(style)
        self._lines: list[str] = []

    @property
    def _prefix(self) -> str:
        return " *" if self.style == CommentStyle.BLOCK else "//"

    def _transform(self, text: str) -> str:
        if self.style == CommentStyle.LINE:
            return text
        text = text.replace(BLOCK_END, BLOCK_END_ESCAPED)
        if text.startswith(TITLE_MARKER):
            match = _TITLE_PATTERN.match(text)
            title = match.group(1).strip() if match else ""
            return f"{title}\n---"
        return BLOCK_TAGS.get(text, text)

    def add(self, text: str) -> CommentBuilder:
        """Add a fragment; multi-line fragments keep their line breaks."""
        for line in self._transform(text).split("\n"):
            self._lines.append(f"{self._prefix} {line}")
        return self

    def end(self) -> str:
        """Render the comment, or an empty string if nothing was added."""
        if not self._lines:
            return ""
        body = "\n".join(self._lines)
        if self.style == CommentStyle.BLOCK:
            return f"/**\n{body}\n */\n"
        return f"{body}\n"


def build_property_comment(
    style: CommentStyle | str,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    deprecated: bool = False,
) -> str:
    """Build the documentation comment for one object property."""
    doc = CommentBuilder(style)
    if title:
        doc.add(f"{TITLE_MARKER} {title}")
    if description:
        doc.add(description)
    if required:
        doc.add(REQUIRED_MARKER)
    if deprecated:
        doc.add(DEPRECATED_MARKER)
    return doc.end()
