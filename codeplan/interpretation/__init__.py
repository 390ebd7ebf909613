"""Request interpretation package."""

from .interpreter import extract_constraints, extract_dependencies, interpret
from .scoring import calculate_complexity, calculate_priority, estimate_work_units
from .tables import LookupTables, build_lookup_tables
from .types import InterpretedRequest, ValidationResult
from .validation import suggest_completions, validate_prompt

__all__ = [
    "interpret",
    "extract_constraints",
    "extract_dependencies",
    "calculate_complexity",
    "calculate_priority",
    "estimate_work_units",
    "LookupTables",
    "build_lookup_tables",
    "InterpretedRequest",
    "ValidationResult",
    "suggest_completions",
    "validate_prompt",
]
