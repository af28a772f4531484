"""
Reference collector.

Renders one named declaration per distinct $ref met while rendering a
schema, recursively, with a memo that guarantees each name is rendered once
and that mutually recursive references terminate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .analyzer.reference_resolver import get_ref_name, resolve_ref
from .config import DeclarationOptions, FormatterConfig
from .declaration import render_declaration
from .formatters import Formatter

logger = logging.getLogger(__name__)


class RefState(str, Enum):
    """Rendering state of a referenced declaration."""

    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass
class MemoEntry:
    state: RefState = RefState.IN_PROGRESS
    text: str = ""


class ReferenceMemo:
    """
    Per-call memo mapping a reference name to its rendered declaration.

    A name is either absent (unseen), in progress (its declaration is being
    rendered further up the call stack) or done.
    """

    def __init__(self):
        self._entries: dict[str, MemoEntry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def state(self, name: str) -> RefState | None:
        entry = self._entries.get(name)
        return entry.state if entry else None

    def start(self, name: str) -> None:
        self._entries[name] = MemoEntry()

    def finish(self, name: str, text: str) -> None:
        self._entries[name] = MemoEntry(RefState.DONE, text)

    def get(self, name: str) -> str | None:
        entry = self._entries.get(name)
        if entry is None or entry.state != RefState.DONE:
            return None
        return entry.text

    def in_progress(self) -> InProgressView:
        """Live view of the names currently being rendered."""
        return InProgressView(self)

    def items(self) -> list[tuple[str, str]]:
        """Completed declarations, in the order they were started."""
        return [(name, entry.text) for name, entry in self._entries.items() if entry.state == RefState.DONE]


class InProgressView:
    """Container answering `name in view` from the memo's current state."""

    def __init__(self, memo: ReferenceMemo):
        self._memo = memo

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._memo.state(name) == RefState.IN_PROGRESS


def expand(
    schema: dict[str, Any] | None,
    name: str,
    document: dict[str, Any],
    options: DeclarationOptions | None = None,
    memo: ReferenceMemo | None = None,
    formatter: Formatter | None = None,
    formatter_config: FormatterConfig | None = None,
) -> str:
    """
    Render a schema as a named declaration, and every referenced schema too.

    Referenced declarations are reported through
    `options.on_ref_declaration(name, text)`; when no callback is set,
    references are not expanded at all. A reference already rendered is
    reported again from the memo without re-rendering. A reference whose
    declaration is still in progress is left as a named type.

    Args:
        schema: Schema or reference object
        name: Declaration name
        document: Document that $ref pointers are resolved against
        options: Declaration options
        memo: Memo shared by all recursive calls of one top-level call
        formatter: Pretty-printer; None leaves the text as is
        formatter_config: Options handed to the formatter

    Returns:
        The declaration for `schema`
    """
    options = options or DeclarationOptions()
    if memo is None:
        memo = ReferenceMemo()
    if name not in memo:
        memo.start(name)

    def on_ref(ref_object: dict[str, Any]) -> None:
        if options.on_ref_declaration is None:
            return
        ref_path = ref_object["$ref"]
        ref_name = get_ref_name(ref_path)
        state = memo.state(ref_name)
        if state == RefState.DONE:
            logger.debug("Reusing rendered declaration for %s", ref_name)
            options.on_ref_declaration(ref_name, memo.get(ref_name))
            return
        if state == RefState.IN_PROGRESS:
            logger.debug("Declaration for %s is in progress, keeping the reference", ref_name)
            return

        memo.start(ref_name)
        logger.debug("Expanding declaration for %s", ref_name)
        result = expand(
            resolve_ref(ref_path, document),
            ref_name,
            document,
            options,
            memo,
            formatter,
            formatter_config,
        )
        memo.finish(ref_name, result)
        options.on_ref_declaration(ref_name, result)

    result = render_declaration(
        schema,
        name,
        document,
        options,
        formatter,
        formatter_config,
        on_ref=on_ref,
        expanding=memo.in_progress(),
    )
    memo.finish(name, result)
    return result
