"""Check that @param tags faithfully describe a callable's parameters."""

from __future__ import annotations

from typing import Any

from docs_standards.constants import (
    ARRAY_TYPE_TOKEN,
    CALLABLE_TYPE_TOKEN,
    CATCH_ALL_CLASS_NAME,
    DEFAULT_MARKER,
    DEFAULT_SIGIL,
    FORBIDDEN_CALLBACK_TOKEN,
    OPTIONAL_MARKER,
)
from docs_standards.exceptions import DocsStandardsError
from docs_standards.models import (
    CallableId,
    CallableSignature,
    DocumentationBlock,
    ParamDocsReport,
    ParameterSignature,
    ParamTag,
    ValidationVerdict,
    Violation,
    ViolationKind,
)
from docs_standards.parsers import DocBlockParser
from docs_standards.signatures import SignatureSource

from .base import ApiChecker

K = ViolationKind


def validate(
    signature: CallableSignature,
    doc: DocumentationBlock,
    sigil: str = DEFAULT_SIGIL,
) -> ValidationVerdict:
    """Validate a parsed docstring against a reflected signature.

    Presence checks run first. A missing docstring stops validation, as does
    a parameter/tag count mismatch (tags are paired with parameters by
    position only, which is unsafe once the counts differ). Every other
    violation is collected.

    Args:
        signature: Reflected parameters of the callable.
        doc: Parsed documentation of the same callable.
        sigil: Prefix expected before parameter names in @param tags.

    Returns:
        Verdict holding every violation found, in rule order.

    Raises:
        MalformedTagError: If a tag's content is not a type and a name.
    """
    name = signature.display_name
    violations: list[Violation] = []

    if not doc.has_comment:
        violations.append(
            Violation(
                K.MISSING_DOC_COMMENT,
                f"The docblock for `{name}` should not be missing.",
                name,
            )
        )
        return ValidationVerdict(name, tuple(violations))

    if not doc.summary.strip():
        violations.append(
            Violation(
                K.EMPTY_SHORT_DESCRIPTION,
                f"The docblock description for `{name}` should not be empty.",
                name,
            )
        )

    n_params, n_tags = len(signature.parameters), len(doc.param_tags)
    if n_params != n_tags:
        violations.append(
            Violation(
                K.PARAM_COUNT_MISMATCH,
                f"The number of @param docs for `{name}` should match its number "
                f"of parameters (expected {n_params}, found {n_tags}).",
                name,
            )
        )
        return ValidationVerdict(name, tuple(violations))

    for param, tag in zip(signature.parameters, doc.param_tags):
        violations.extend(_check_param(name, param, tag, sigil))

    return ValidationVerdict(name, tuple(violations))


def effective_description(description: str) -> str:
    """Return the text the phrasing rules apply to.

    A description wrapped in `{` ... `}` documents a mapping key by key; its
    second line is the summary of the parameter. A one-line `{...}` has no
    second line and counts as empty.
    """
    stripped = description.strip()
    if stripped.startswith("{") and stripped.endswith("}"):
        lines = stripped.split("\n")
        return lines[1].strip() if len(lines) > 1 else ""
    return stripped


def is_empty_array(value: Any) -> bool:
    """True for `[]`, `()` and `{}` defaults, which need no narration."""
    return type(value) in (list, tuple, dict) and len(value) == 0


def _check_param(
    name: str, param: ParameterSignature, tag: ParamTag, sigil: str
) -> list[Violation]:
    """Apply the per-parameter rules to one positional (param, tag) pair."""
    var = f"{sigil}{param.name}"
    description = effective_description(tag.description)
    found: list[Violation] = []

    def report(kind: ViolationKind, message: str) -> None:
        found.append(Violation(kind, message, name, var))

    if not description:
        report(
            K.EMPTY_PARAM_DESCRIPTION,
            f"The @param description for the `{var}` parameter of `{name}` "
            "should not be empty.",
        )

    doc_type, doc_name = tag.split_content()

    if doc_name != var:
        report(
            K.PARAM_NAME_MISMATCH,
            f"The @param name for the `{var}` parameter of `{name}` is incorrect "
            f"(found `{doc_name}`).",
        )

    if param.is_array_type and ARRAY_TYPE_TOKEN not in doc_type:
        report(
            K.MISSING_ARRAY_TYPE_HINT,
            f"The @param type hint for the `{var}` parameter of `{name}` should "
            "state that it accepts an array.",
        )

    class_name = param.declared_class_name
    if class_name and class_name != CATCH_ALL_CLASS_NAME and class_name not in doc_type:
        report(
            K.MISSING_CLASS_TYPE_HINT,
            f"The @param type hint for the `{var}` parameter of `{name}` should "
            f"state that it accepts an object of type `{class_name}`.",
        )

    if FORBIDDEN_CALLBACK_TOKEN in doc_type:
        report(
            K.FORBIDDEN_CALLBACK_TOKEN,
            "`callback` is not a valid type. `callable` should be used in the "
            f"@param type hint for the `{var}` parameter of `{name}` instead.",
        )

    if param.is_callable_type and CALLABLE_TYPE_TOKEN not in doc_type:
        report(
            K.MISSING_CALLABLE_TYPE_HINT,
            f"The @param type hint for the `{var}` parameter of `{name}` should "
            "state that it accepts a callable.",
        )

    if param.is_optional:
        if OPTIONAL_MARKER not in description:
            report(
                K.MISSING_OPTIONAL_MARKER,
                f"The @param description for the optional `{var}` parameter of "
                f"`{name}` should state that it is optional.",
            )
    elif OPTIONAL_MARKER in description:
        report(
            K.SPURIOUS_OPTIONAL_MARKER,
            f"The @param description for the required `{var}` parameter of "
            f"`{name}` should not state that it is optional.",
        )

    if param.has_default_value and not is_empty_array(param.default_value):
        if DEFAULT_MARKER not in description:
            report(
                K.MISSING_DEFAULT_VALUE_NOTE,
                f"The @param description for the `{var}` parameter of `{name}` "
                "should state its default value.",
            )
    elif DEFAULT_MARKER in description:
        report(
            K.SPURIOUS_DEFAULT_VALUE_NOTE,
            f"The @param description for the `{var}` parameter of `{name}` "
            "should not state a default value.",
        )

    return found


class ParamDocsChecker(ApiChecker):
    """Validate @param docs of every target callable into the report."""

    def __init__(
        self,
        signature_source: SignatureSource,
        doc_parser: DocBlockParser,
        functions: list[str],
        classes: list[str],
        sigil: str = DEFAULT_SIGIL,
        skip_private: bool = False,
        ignore_methods: set[str] | None = None,
        verbose: bool = False,
    ):
        super().__init__(
            signature_source, functions, classes, skip_private, ignore_methods
        )
        self.doc_parser = doc_parser
        self.sigil = sigil
        self.verbose = verbose

    def check_api(self, callable_id: CallableId, report: ParamDocsReport) -> None:
        """Append the callable's verdict, or a harness error, to report."""
        if self.verbose:
            print(f"  Checking {callable_id.display_name}...")
        try:
            signature = self.signature_source.get_signature(callable_id)
            doc = self.doc_parser.get_documentation(callable_id)
            verdict = validate(signature, doc, self.sigil)
        except DocsStandardsError as e:
            report.errors.append(f"{callable_id.display_name}: {e}")
            return
        report.verdicts.append(verdict)
