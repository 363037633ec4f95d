"""Pydantic model for a language issue as written to the reports.

A :class:`LanguageIssue` is the reporting view of a
:class:`~langcheck.models.rule_match.RuleMatch`: it adds the document name,
the surrounding context with the offending text highlighted and the
line/column of the match. Values are sanitised: strings are trimmed
and line breaks in the context are folded.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import IssueType


class LanguageIssue(BaseModel):
    """Model for a single issue found in a document.

    Contract:
    - filename: Document filename (non-empty)
    - rule_id: Rule identifier (non-empty)
    - message: Rule message (non-empty)
    - issue_type: one of the IssueType values
    - context: raw text surrounding the issue
    - highlighted_context: context with the issue wrapped in ``**`` markers
    - issue: the text the rule flagged
    - offset/line/column: position of the issue in the document, when known
    """

    model_config = ConfigDict(extra="forbid")

    filename: str
    rule_id: str
    message: str
    issue_type: IssueType = IssueType.GRAMMAR
    context: str = ""
    highlighted_context: str
    issue: str = ""
    offset: int | None = Field(default=None, ge=0)
    line: int | None = Field(default=None, ge=1)
    column: int | None = Field(default=None, ge=1)

    @field_validator("rule_id", "message", "issue", mode="before")
    def _strip_strings(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("context", "highlighted_context", mode="before")
    def _normalise_context(cls, value: object) -> str:
        # Whitespace inside the context is meaningful, only newlines are folded.
        return " ".join(str(value or "").splitlines()).strip()

    @field_validator("filename", mode="before")
    def _strip_filename(cls, value: object) -> str:
        result = str(value or "").strip()
        if not result:
            raise ValueError("filename must not be empty")
        return result

    @model_validator(mode="after")
    def final_checks(self) -> "LanguageIssue":
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.highlighted_context:
            raise ValueError("highlighted_context must not be empty")
        return self
