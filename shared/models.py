"""
HillForge Data Models
======================

Pydantic v2 models shared across HillForge components. Every engine
operation reports a single :class:`OperationResult` carrying findings
(observations about the matrix or key) and a structured metadata
payload suitable for JSON output.

References:
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity level.

    Attributes:
        HIGH:   The operand cannot be used for its intended purpose
                (e.g. a non-invertible key).
        MEDIUM: Usable, but with a caveat the caller should know about.
        LOW:    Minor observation.
        INFO:   Informational observation.
    """

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation produced by an engine operation.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Raw data supporting the finding.
        recommendation: Suggested follow-up action.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity = Field(..., description="Severity level of this finding")
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = Field(default="")
    recommendation: str = Field(default="")

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class OperationResult(BaseModel):
    """Aggregated result of a single engine operation.

    Attributes:
        tool_name:  Name of the component that produced the result.
        operation:  Operation name (``keygen``, ``invert``, ...).
        subject:    What the operation ran on, e.g. ``"3x3 mod 26"``.
        start_time: UTC timestamp when the operation started.
        end_time:   UTC timestamp when the operation ended.
        findings:   Individual findings.
        summary:    Human-readable summary text.
        metadata:   Structured payload (a dumped operation-specific model).
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(..., min_length=1)
    operation: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def highest_severity(self) -> Severity | None:
        """The most severe finding, or ``None`` when the list is empty."""
        if not self.findings:
            return None
        order = list(Severity)
        return min((f.severity for f in self.findings), key=order.index)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> OperationResult:
        """Mark the operation as complete by setting *end_time* and *summary*.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        elif not self.summary:
            self.summary = (
                f"{self.operation} complete. Findings: {len(self.findings)}"
            )
        return self
