"""
Prompt templates for test file generation.

This module supplies the fixed instruction sent with every generation request.
The implementation source itself is sent unchanged as the user message. It
does not import adapters or external dependencies.
"""

from __future__ import annotations

# Default frameworks named in the instruction so the model picks idiomatic tooling.
FRAMEWORK_HINTS: dict[str, str] = {
    ".ts": "Jest",
    ".tsx": "Jest with React Testing Library",
    ".js": "Jest",
    ".jsx": "Jest with React Testing Library",
    ".cs": "xUnit",
    ".swift": "XCTest",
    ".java": "JUnit 5",
    ".php": "PHPUnit",
    ".py": "pytest",
    ".rb": "RSpec",
    ".go": "the standard testing package",
    ".cpp": "GoogleTest",
}

_INSTRUCTION_TEMPLATE = (
    "You are a test file generator. The user message is the complete source of "
    "a {extension} file. Write a test file for it, using {framework}. "
    "Respond with the text of the test file only: no commentary, no "
    "explanations and no markdown formatting or code fences."
)


def generation_instruction(extension: str) -> str:
    """
    Build the system instruction for a test file with ``extension``.

    Args:
        extension: Extension of the implementation file, with its leading dot

    Returns:
        The instruction text
    """
    framework = FRAMEWORK_HINTS.get(extension, "the conventional test framework")
    return _INSTRUCTION_TEMPLATE.format(extension=extension, framework=framework)
