"""Parse docstrings written with @param tags into DocumentationBlock objects.

A docblock looks like::

    Fetch items from the store.

    Longer explanation, any number of paragraphs.

    @param array    $keys  Keys to fetch.
    @param int|null $limit Optional. Maximum number of items. Default null.
    @param array    $args {
        Optional. Query arguments.

        @type string $order Sort order.
    }

Tags start on unindented lines beginning with `@`; indented lines (such as
the `@type` entries of a hash description) continue the previous tag.
"""

from __future__ import annotations

import inspect
import re
from typing import Any

from docs_standards.models import CallableId, DocumentationBlock, ParamTag
from docs_standards.signatures import SignatureSource


class DocBlockParser:
    """Documentation source: docstring text -> DocumentationBlock.

    Attributes:
        signature_source: Used to resolve callable identifiers to objects.
    """

    # Regex: "@name rest" at the start of an unindented line
    TAG_PATTERN = re.compile(r"^@(\w+)(?:\s+(.*))?$", re.DOTALL)
    # Regex: up to two leading whitespace-delimited tokens, then the rest
    PARAM_CONTENT_PATTERN = re.compile(r"^(\S+)(?:\s+(\S+))?(?:\s+(.*))?$", re.DOTALL)

    def __init__(self, signature_source: SignatureSource | None = None):
        """Initialize parser.

        Args:
            signature_source: Resolver for callable identifiers. A fresh
                SignatureSource is created if omitted.
        """
        self.signature_source = signature_source or SignatureSource()

    # -------------------------------------------------------------------------
    # Public methods
    # -------------------------------------------------------------------------

    def get_documentation(self, callable_id: CallableId) -> DocumentationBlock:
        """Parse the docstring attached to a function or method.

        Only the callable's own `__doc__` counts; a docstring inherited from a
        parent class method does not document the override.

        Raises:
            CallableNotFoundError: If the callable does not exist.
        """
        func, _ = self.signature_source.get_callable(callable_id)
        return self.parse(_own_docstring(func))

    def parse(self, docstring: str | None) -> DocumentationBlock:
        """Parse raw docstring text.

        Args:
            docstring: Raw `__doc__` value, or None when there is none.

        Returns:
            DocumentationBlock with summary, long description and @param tags.
        """
        if docstring is None:
            return DocumentationBlock.missing()

        lines = inspect.cleandoc(docstring).split("\n")
        body, tag_texts = self._split_tags(lines)
        summary, long_description = self._split_description(body)

        param_tags = []
        for tag_text in tag_texts:
            match = self.TAG_PATTERN.match(tag_text)
            if match and match.group(1) == "param":
                param_tags.append(self.parse_param_content(match.group(2) or ""))

        return DocumentationBlock(
            has_comment=True,
            summary=summary,
            long_description=long_description,
            param_tags=tuple(param_tags),
        )

    def parse_param_content(self, content: str) -> ParamTag:
        """Split `type $name description` into a ParamTag.

        Content that holds fewer than two tokens is kept as-is in
        `raw_content`; the validator reports it as a malformed tag.
        """
        match = self.PARAM_CONTENT_PATTERN.match(content.strip())
        if not match:
            return ParamTag(raw_content="")
        type_token, name_token, description = match.groups()
        raw = f"{type_token} {name_token}" if name_token else type_token
        return ParamTag(raw_content=raw, description=(description or "").strip())

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _split_tags(self, lines: list[str]) -> tuple[list[str], list[str]]:
        """Separate description lines from tag blocks.

        Returns:
            Tuple of (description lines, one string per tag with its
            continuation lines joined by newlines).
        """
        body: list[str] = []
        tags: list[str] = []
        for line in lines:
            if line.startswith("@"):
                tags.append(line.rstrip())
            elif tags:
                tags[-1] += "\n" + line.rstrip()
            else:
                body.append(line)
        return body, [t.rstrip() for t in tags]

    def _split_description(self, lines: list[str]) -> tuple[str, str]:
        """Split description lines into (summary, long description).

        The summary ends at the first blank line or at a line ending in a
        full stop, whichever comes first.
        """
        while lines and not lines[0].strip():
            lines = lines[1:]
        summary: list[str] = []
        rest_start = len(lines)
        for i, line in enumerate(lines):
            if not line.strip():
                rest_start = i
                break
            summary.append(line.strip())
            if line.rstrip().endswith("."):
                rest_start = i + 1
                break
        long_description = "\n".join(lines[rest_start:]).strip()
        return " ".join(summary), long_description


def _own_docstring(func: Any) -> str | None:
    """`__doc__` of the object itself, never an inherited one."""
    doc = getattr(func, "__doc__", None)
    return doc if isinstance(doc, str) else None
