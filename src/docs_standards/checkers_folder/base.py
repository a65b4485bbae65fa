from abc import ABC, abstractmethod
from typing import Iterator

from docs_standards.exceptions import CallableNotFoundError
from docs_standards.models import CallableId, ParamDocsReport
from docs_standards.signatures import SignatureSource


class Checker(ABC):
    """Base for all checkers. Takes report, mutates it."""

    @abstractmethod
    def check(self, report: ParamDocsReport) -> None: ...


class ApiChecker(Checker, ABC):
    """Iterate target callables, run per-callable logic.

    Targets are function paths plus class paths; each class expands to
    its methods. Missing targets, and modules that fail to import, are
    recorded in `report.errors` and skipped, so one typo does not hide
    the rest of the run.
    """

    def __init__(
        self,
        signature_source: SignatureSource,
        functions: list[str],
        classes: list[str],
        skip_private: bool = False,
        ignore_methods: set[str] | None = None,
    ):
        self.signature_source = signature_source
        self.functions = functions
        self.classes = classes
        self.skip_private = skip_private
        self.ignore_methods = ignore_methods or set()

    def _iter_apis(self, report: ParamDocsReport) -> Iterator[CallableId]:
        for function in self.functions:
            try:
                yield self.signature_source.function_id(function)
            except CallableNotFoundError as e:
                report.errors.append(str(e))
        for class_path in self.classes:
            try:
                method_ids = self.signature_source.method_ids(
                    class_path, self.skip_private, self.ignore_methods
                )
            except CallableNotFoundError as e:
                report.errors.append(str(e))
                continue
            yield from method_ids

    @abstractmethod
    def check_api(self, callable_id: CallableId, report: ParamDocsReport) -> None:
        """Check a single callable. Append verdict or error to report."""
        ...

    def check(self, report: ParamDocsReport) -> None:
        for callable_id in self._iter_apis(report):
            self.check_api(callable_id, report)
