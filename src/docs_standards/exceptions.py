"""Exception hierarchy for docs-standards."""


class DocsStandardsError(Exception):
    """Base exception for docs-standards."""


class MalformedTagError(DocsStandardsError):
    """A @param tag does not split into a type token and a name token.

    This is a data-quality fault from the documentation parser, not a
    documentation-style violation.
    """


class CallableNotFoundError(DocsStandardsError):
    """Function, class or method could not be resolved."""


class ConfigurationError(DocsStandardsError):
    """Invalid or unreadable configuration."""


class TargetImportError(CallableNotFoundError):
    """Module holding a target raised while being imported."""
