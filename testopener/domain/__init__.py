"""Domain layer: models and naming conventions."""

from .conventions import CONVENTION_RULES, ConventionRule, find_rule, resolve
from .models import (
    Document,
    GeneratedTestFile,
    GenerationRequest,
    ImplementationFileIdentity,
    OpenOutcome,
    OpenTestResult,
    PickItem,
    TestFileCandidate,
    TestOpenerError,
)

__all__ = [
    "CONVENTION_RULES",
    "ConventionRule",
    "find_rule",
    "resolve",
    "Document",
    "GeneratedTestFile",
    "GenerationRequest",
    "ImplementationFileIdentity",
    "OpenOutcome",
    "OpenTestResult",
    "PickItem",
    "TestFileCandidate",
    "TestOpenerError",
]
