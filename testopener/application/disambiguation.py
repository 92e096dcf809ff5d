"""
Candidate disambiguation.

Selects a single test file from the candidates a search produced. Only the
many-candidates case involves the user, through an injected picker.
"""

from collections.abc import Awaitable, Callable, Sequence

from ..domain.models import PickItem, TestFileCandidate

Picker = Callable[[list[PickItem]], Awaitable[str | None]]


async def choose(
    candidates: Sequence[TestFileCandidate], picker: Picker
) -> str | None:
    """
    Resolve candidates to one path.

    Args:
        candidates: Located test files
        picker: Single-choice chooser, only awaited for two or more candidates

    Returns:
        The chosen path, or None when there are no candidates or the user
        cancelled the picker
    """
    if not candidates:
        return None

    if len(candidates) == 1:
        return candidates[0].path

    items = [
        PickItem(label=candidate.display_name, detail=candidate.path)
        for candidate in candidates
    ]
    return await picker(items)
