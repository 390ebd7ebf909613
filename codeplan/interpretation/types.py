"""Shared interpretation types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from codeplan.lexical.types import LexicalAnalysis


@dataclass(frozen=True)
class InterpretedRequest:
    """Structured reading of one request. Built once, read-only afterwards."""

    original_prompt: str
    analysis: LexicalAnalysis
    language: Optional[str] = None
    framework: Optional[str] = None
    platform: Optional[str] = None
    dependencies: tuple[str, ...] = ()
    constraints: tuple[str, ...] = ()
    complexity: int = 1  # 1 to 10
    priority: int = 5  # 1 to 10
    estimated_work_units: int = 0

    def to_dict(self) -> dict:
        return {
            "original_prompt": self.original_prompt,
            "language": self.language,
            "framework": self.framework,
            "platform": self.platform,
            "dependencies": list(self.dependencies),
            "constraints": list(self.constraints),
            "complexity": self.complexity,
            "priority": self.priority,
            "estimated_work_units": self.estimated_work_units,
        }


@dataclass
class ValidationResult:
    """Outcome of prompt validation. Problems are reported, never raised."""

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
        }
