"""Pytest helpers: run the @param checks as one test per callable.

Usage in a project's test suite::

    import pytest
    from docs_standards.testing import assert_param_docs, callable_params

    @pytest.mark.parametrize(
        "callable_id", callable_params(["pkg.mod.func"], ["pkg.mod.Client"])
    )
    def test_param_docs(callable_id):
        assert_param_docs(callable_id)
"""

from __future__ import annotations

from typing import Any, Iterator

import pytest

from docs_standards.checkers_folder.doc_params import validate
from docs_standards.constants import DEFAULT_SIGIL
from docs_standards.models import CallableId
from docs_standards.parsers import DocBlockParser
from docs_standards.signatures import SignatureSource


def iter_callables(
    functions: list[str],
    classes: list[str],
    source: SignatureSource | None = None,
    skip_private: bool = False,
) -> Iterator[CallableId]:
    """Yield a CallableId per function and per method of each class.

    Raises:
        CallableNotFoundError: As soon as a function or class is missing.
    """
    source = source or SignatureSource()
    for function in functions:
        yield source.function_id(function)
    for class_path in classes:
        yield from source.method_ids(class_path, skip_private)


def callable_params(
    functions: list[str], classes: list[str], skip_private: bool = False
) -> list[Any]:
    """`pytest.param` entries, one per callable, with readable test ids."""
    return [
        pytest.param(callable_id, id=callable_id.display_name)
        for callable_id in iter_callables(functions, classes, skip_private=skip_private)
    ]


def assert_param_docs(callable_id: CallableId, sigil: str = DEFAULT_SIGIL) -> None:
    """Fail with every violation message if the callable's docs are not compliant."""
    source = SignatureSource()
    verdict = validate(
        source.get_signature(callable_id),
        DocBlockParser(source).get_documentation(callable_id),
        sigil,
    )
    if not verdict.is_compliant:
        raise AssertionError("\n".join(v.message for v in verdict.violations))
