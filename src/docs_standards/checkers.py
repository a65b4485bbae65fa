"""Parameter documentation checks over a set of target callables."""

from __future__ import annotations

from docs_standards.checkers_folder.doc_params import ParamDocsChecker
from docs_standards.config import CheckConfig
from docs_standards.models import ParamDocsReport
from docs_standards.parsers import DocBlockParser
from docs_standards.signatures import SignatureSource


class ParamDocsDetector:
    """Run the @param documentation checks for configured functions and classes."""

    def __init__(self, config: CheckConfig):
        self.config = config
        self.signature_source = SignatureSource()
        self.doc_parser = DocBlockParser(self.signature_source)

    def check_all(self, verbose: bool = False) -> ParamDocsReport:
        """Validate every configured callable.

        Args:
            verbose: Print progress

        Returns:
            Report with one verdict per checked callable, plus errors for
            targets that do not exist or carry malformed tags.
        """
        report = ParamDocsReport()
        if not self.config.functions and not self.config.classes:
            report.warnings.append("No functions or classes configured to check")
            return report

        if verbose:
            print(
                f"Checking {len(self.config.functions)} functions and "
                f"{len(self.config.classes)} classes..."
            )
        checker = ParamDocsChecker(
            self.signature_source,
            self.doc_parser,
            functions=self.config.functions,
            classes=self.config.classes,
            sigil=self.config.sigil,
            skip_private=self.config.skip_private,
            ignore_methods=set(self.config.ignore_methods),
            verbose=verbose,
        )
        checker.check(report)
        return report
