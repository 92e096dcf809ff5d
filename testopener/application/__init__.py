from .disambiguation import choose
from .generation_orchestrator import GenerationOrchestrator, GenerationState
from .open_test_usecase import OpenTestFileUseCase

__all__ = ["choose", "GenerationOrchestrator", "GenerationState", "OpenTestFileUseCase"]
