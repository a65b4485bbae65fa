"""Check that docstring @param tags describe callable signatures."""

from docs_standards.checkers import ParamDocsDetector
from docs_standards.checkers_folder.doc_params import validate
from docs_standards.config import CheckConfig, load_config
from docs_standards.exceptions import (
    CallableNotFoundError,
    ConfigurationError,
    DocsStandardsError,
    MalformedTagError,
    TargetImportError,
)
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

__version__ = "0.1.0"

__all__ = [
    "CallableId",
    "CallableNotFoundError",
    "CallableSignature",
    "CheckConfig",
    "ConfigurationError",
    "DocBlockParser",
    "DocsStandardsError",
    "DocumentationBlock",
    "MalformedTagError",
    "ParamDocsDetector",
    "ParamDocsReport",
    "ParamTag",
    "ParameterSignature",
    "SignatureSource",
    "TargetImportError",
    "ValidationVerdict",
    "Violation",
    "ViolationKind",
    "load_config",
    "validate",
]
