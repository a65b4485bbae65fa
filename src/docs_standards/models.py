"""Data models for parameter documentation checks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from docs_standards.exceptions import MalformedTagError

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class CallableId:
    """Function path, or (class path, method name) pair."""

    target: str  # "pkg.mod.func" or "pkg.mod.Class"
    method: str | None = None

    @property
    def is_method(self) -> bool:
        return self.method is not None

    @property
    def display_name(self) -> str:
        if self.method is not None:
            return f"{self.target}::{self.method}()"
        return f"{self.target}()"


@dataclass(frozen=True)
class ParameterSignature:
    """One formal parameter of a callable, in declaration order."""

    name: str  # no sigil
    is_array_type: bool = False
    is_callable_type: bool = False
    declared_class_name: str | None = None
    is_optional: bool = False
    has_default_value: bool = False
    default_value: Any = None


@dataclass(frozen=True)
class CallableSignature:
    """Reflected signature of one function or method."""

    callable_id: CallableId
    parameters: tuple[ParameterSignature, ...] = ()

    @property
    def display_name(self) -> str:
        return self.callable_id.display_name


@dataclass(frozen=True)
class ParamTag:
    """One @param entry: `type $name` plus free-text description."""

    raw_content: str  # "array $items"
    description: str = ""

    def split_content(self) -> tuple[str, str]:
        """Split raw content into (type token, name token).

        Raises:
            MalformedTagError: If raw content is not exactly two tokens.
        """
        tokens = _WHITESPACE.split(self.raw_content.strip())
        if len(tokens) != 2 or not all(tokens):
            raise MalformedTagError(
                f"@param tag content {self.raw_content!r} should be a type "
                "followed by a parameter name"
            )
        return tokens[0], tokens[1]

    @property
    def declared_type_token(self) -> str:
        return self.split_content()[0]

    @property
    def declared_name(self) -> str:
        return self.split_content()[1]


@dataclass(frozen=True)
class DocumentationBlock:
    """Parsed docstring of one callable."""

    has_comment: bool
    summary: str = ""
    long_description: str = ""
    param_tags: tuple[ParamTag, ...] = ()

    @classmethod
    def missing(cls) -> DocumentationBlock:
        return cls(has_comment=False)


class ViolationKind(str, Enum):
    """Documentation rules a callable can break."""

    MISSING_DOC_COMMENT = "missing_doc_comment"
    EMPTY_SHORT_DESCRIPTION = "empty_short_description"
    PARAM_COUNT_MISMATCH = "param_count_mismatch"
    EMPTY_PARAM_DESCRIPTION = "empty_param_description"
    PARAM_NAME_MISMATCH = "param_name_mismatch"
    MISSING_ARRAY_TYPE_HINT = "missing_array_type_hint"
    MISSING_CLASS_TYPE_HINT = "missing_class_type_hint"
    FORBIDDEN_CALLBACK_TOKEN = "forbidden_callback_token"
    MISSING_CALLABLE_TYPE_HINT = "missing_callable_type_hint"
    MISSING_OPTIONAL_MARKER = "missing_optional_marker"
    SPURIOUS_OPTIONAL_MARKER = "spurious_optional_marker"
    MISSING_DEFAULT_VALUE_NOTE = "missing_default_value_note"
    SPURIOUS_DEFAULT_VALUE_NOTE = "spurious_default_value_note"


@dataclass(frozen=True)
class Violation:
    """A single broken rule with its rendered message."""

    kind: ViolationKind
    message: str
    callable_name: str
    parameter: str | None = None  # sigiled, e.g. "$items"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "callable": self.callable_name,
            "parameter": self.parameter,
        }


@dataclass(frozen=True)
class ValidationVerdict:
    """Result of validating one callable: compliant or a list of violations."""

    callable_name: str
    violations: tuple[Violation, ...] = ()

    @property
    def is_compliant(self) -> bool:
        return not self.violations

    def kinds(self) -> list[ViolationKind]:
        return [v.kind for v in self.violations]

    def to_dict(self) -> dict[str, Any]:
        return {
            "callable": self.callable_name,
            "compliant": self.is_compliant,
            "violations": [v.to_dict() for v in self.violations],
        }


@dataclass
class ParamDocsReport:
    """Aggregated verdicts and harness errors for one run."""

    verdicts: list[ValidationVerdict] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)  # not found, malformed tags
    warnings: list[str] = field(default_factory=list)

    @property
    def violations(self) -> list[Violation]:
        return [v for verdict in self.verdicts for v in verdict.violations]

    @property
    def checked_count(self) -> int:
        return len(self.verdicts)

    def has_issues(self) -> bool:
        return bool(self.violations or self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "checked": self.checked_count,
            "verdicts": [v.to_dict() for v in self.verdicts if not v.is_compliant],
            "errors": self.errors,
            "warnings": self.warnings,
            "has_issues": self.has_issues(),
        }
