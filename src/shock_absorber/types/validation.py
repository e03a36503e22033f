"""Validation check result types."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CheckResult(BaseModel):
    """Result of a single validation check."""

    name: str
    passed: bool
    value: float = 0.0
    threshold: float = 0.0
    message: str = ""


class ValidationReport(BaseModel):
    """A batch of checks run against one trajectory."""

    regime: str = ""
    checks: list[CheckResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)
