from dataclasses import dataclass, field
from typing import Literal

Severity = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class Party:
    """A party to the agreement and the role it plays."""

    name: str
    role: str


@dataclass(frozen=True)
class DateItem:
    """A dated event mentioned in the document."""

    event: str
    date: str


@dataclass(frozen=True)
class Term:
    """A key contractual term."""

    title: str
    description: str


@dataclass(frozen=True)
class Risk:
    """A potential risk with its severity."""

    title: str
    description: str
    severity: Severity


@dataclass(frozen=True)
class Summary:
    """Structured summary of a legal document.

    ``degraded`` is set when summarization failed and the content only
    describes the failure.
    """

    parties: list[Party] = field(default_factory=list)
    obligations: list[str] = field(default_factory=list)
    dates: list[DateItem] = field(default_factory=list)
    terms: list[Term] = field(default_factory=list)
    risks: list[Risk] = field(default_factory=list)
    raw: str = ""
    degraded: bool = False


def degraded_summary(reason: str) -> Summary:
    """Build the fallback summary returned when summarization fails."""
    return Summary(
        obligations=["Error: Failed to analyze document"],
        risks=[
            Risk(
                title="Analysis Error",
                description=f"Failed to analyze document: {reason}",
                severity="high",
            )
        ],
        raw="Failed to generate summary due to an error.",
        degraded=True,
    )
