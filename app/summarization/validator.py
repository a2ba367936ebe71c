"""Validates parsed model output and builds a Summary."""

from typing import Any

from app.summarization.exceptions import SummarizationValidationError
from app.summarization.models import DateItem, Party, Risk, Severity, Summary, Term

_VALID_SEVERITIES = frozenset({"high", "medium", "low"})


def validate_and_build(data: dict[str, Any]) -> Summary:
    """Validate raw parsed JSON and build a Summary.

    Missing list fields default to empty lists and a missing ``raw`` to an
    empty string; present fields must have the documented shape.

    Raises:
        SummarizationValidationError: on any validation failure.
    """
    return Summary(
        parties=[_build_party(item, i) for i, item in enumerate(_list(data, "parties"))],
        obligations=[
            _build_obligation(item, i) for i, item in enumerate(_list(data, "obligations"))
        ],
        dates=[_build_date(item, i) for i, item in enumerate(_list(data, "dates"))],
        terms=[_build_term(item, i) for i, item in enumerate(_list(data, "terms"))],
        risks=[_build_risk(item, i) for i, item in enumerate(_list(data, "risks"))],
        raw=_build_raw(data.get("raw")),
    )


def _list(data: dict[str, Any], key: str) -> list[Any]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SummarizationValidationError(f"'{key}' must be a list")
    return raw


def _object(raw: Any, key: str, index: int) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise SummarizationValidationError(f"'{key}' item at index {index} must be an object")
    return raw


def _string(raw: dict[str, Any], field: str, key: str, index: int) -> str:
    value = raw.get(field)
    if not isinstance(value, str):
        raise SummarizationValidationError(
            f"'{key}' item at index {index}: '{field}' must be a string"
        )
    return value


def _build_party(raw: Any, index: int) -> Party:
    item = _object(raw, "parties", index)
    return Party(
        name=_string(item, "name", "parties", index),
        role=_string(item, "role", "parties", index),
    )


def _build_obligation(raw: Any, index: int) -> str:
    if not isinstance(raw, str):
        raise SummarizationValidationError(
            f"'obligations' item at index {index} must be a string"
        )
    return raw


def _build_date(raw: Any, index: int) -> DateItem:
    item = _object(raw, "dates", index)
    return DateItem(
        event=_string(item, "event", "dates", index),
        date=_string(item, "date", "dates", index),
    )


def _build_term(raw: Any, index: int) -> Term:
    item = _object(raw, "terms", index)
    return Term(
        title=_string(item, "title", "terms", index),
        description=_string(item, "description", "terms", index),
    )


def _build_risk(raw: Any, index: int) -> Risk:
    item = _object(raw, "risks", index)
    severity = _string(item, "severity", "risks", index).strip().lower()
    if severity not in _VALID_SEVERITIES:
        raise SummarizationValidationError(
            f"'risks' item at index {index}: 'severity' must be one of "
            f"{sorted(_VALID_SEVERITIES)}, got {severity!r}"
        )
    validated: Severity = severity  # type: ignore[assignment]
    return Risk(
        title=_string(item, "title", "risks", index),
        description=_string(item, "description", "risks", index),
        severity=validated,
    )


def _build_raw(raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise SummarizationValidationError("'raw' must be a string")
    return raw
