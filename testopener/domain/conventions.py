"""
Test file naming conventions per language ecosystem.

The table is an ordered list of rules. Each rule maps a group of extensions
to a template that builds the test file glob for an implementation file's
base name. The first rule whose group contains the extension wins; groups do
not overlap.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .models import ImplementationFileIdentity


@dataclass(frozen=True)
class ConventionRule:
    """Maps a group of extensions to a test filename template."""

    name: str
    extension_group: frozenset[str]
    pattern_template: Callable[[str, str], str]

    def matches(self, extension: str) -> bool:
        return extension in self.extension_group

    def apply(self, base_name: str, extension: str) -> str:
        return self.pattern_template(base_name, extension)


CONVENTION_RULES: tuple[ConventionRule, ...] = (
    # `**` leaves room for infix markers such as .test / .spec
    ConventionRule(
        name="javascript",
        extension_group=frozenset({".tsx", ".jsx", ".js", ".ts"}),
        pattern_template=lambda base, ext: f"{base}.**{ext}",
    ),
    ConventionRule(
        name="dotnet-swift",
        extension_group=frozenset({".cs", ".swift"}),
        pattern_template=lambda base, ext: f"{base}Tests{ext}",
    ),
    ConventionRule(
        name="java-php",
        extension_group=frozenset({".java", ".php"}),
        pattern_template=lambda base, ext: f"{base}Test{ext}",
    ),
    ConventionRule(
        name="python",
        extension_group=frozenset({".py"}),
        pattern_template=lambda base, ext: f"test_{base}{ext}",
    ),
    ConventionRule(
        name="underscore-suffix",
        extension_group=frozenset({".rb", ".go", ".cpp"}),
        pattern_template=lambda base, ext: f"{base}_**{ext}",
    ),
)


def find_rule(extension: str) -> ConventionRule | None:
    """Return the first rule that handles ``extension``, if any."""
    for rule in CONVENTION_RULES:
        if rule.matches(extension):
            return rule
    return None


def resolve(base_name: str, extension: str) -> str | None:
    """
    Build the test file search pattern for an implementation file.

    Args:
        base_name: File name without extension (e.g. ``"Foo"``)
        extension: Extension with its leading dot (e.g. ``".ts"``)

    Returns:
        The glob pattern (e.g. ``"Foo.**.ts"``), or None when the extension
        is not covered by any convention.
    """
    rule = find_rule(extension)
    if rule is None:
        return None
    return rule.apply(base_name, extension)


def resolve_for(identity: ImplementationFileIdentity) -> str | None:
    return resolve(identity.base_name, identity.extension)


def supported_extensions() -> list[str]:
    """All extensions covered by the table, in rule order."""
    extensions: list[str] = []
    for rule in CONVENTION_RULES:
        extensions.extend(sorted(rule.extension_group))
    return extensions
