"""Pydantic model for a single rule match.

A match is produced once by a rule and never changed afterwards. Offsets are
0-based character positions into the sentence the rule looked at; the
checker shifts them into document positions with :meth:`RuleMatch.shifted`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RuleMatch(BaseModel):
    """Position-anchored result of a successful rule evaluation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rule_id: str
    from_pos: int = Field(ge=0)
    to_pos: int = Field(ge=0)
    message: str
    short_message: str = ""

    @field_validator("rule_id", "message", "short_message", mode="before")
    def _strip_strings(cls, value: object) -> str:
        return str(value or "").strip()

    @model_validator(mode="after")
    def final_checks(self) -> "RuleMatch":
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if self.to_pos < self.from_pos:
            raise ValueError(
                f"to_pos ({self.to_pos}) must not be before from_pos ({self.from_pos})"
            )
        return self

    @property
    def length(self) -> int:
        return self.to_pos - self.from_pos

    def shifted(self, offset: int) -> "RuleMatch":
        """Return a copy whose offsets are moved right by ``offset``."""
        if offset == 0:
            return self
        return RuleMatch(
            rule_id=self.rule_id,
            from_pos=self.from_pos + offset,
            to_pos=self.to_pos + offset,
            message=self.message,
            short_message=self.short_message,
        )
