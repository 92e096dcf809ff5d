from .registry import FRAMEWORK_HINTS, generation_instruction

__all__ = ["FRAMEWORK_HINTS", "generation_instruction"]
