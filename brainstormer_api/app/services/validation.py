"""
Declarative request validation.

A rule set maps external field names (as they appear on the wire, e.g.
``sessionName``) to a :class:`FieldRule`.  :func:`validate` checks a
record against such a set and reports every offending field at once
instead of stopping at the first one.  Each field gets a single
reason: the first constraint it violates, checked in the order
required, type, maximum length.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from ..core.config import Settings, settings as default_settings

_TYPE_NAMES = {str: "string", int: "integer", float: "number", bool: "boolean"}


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one field."""

    required: bool = False
    max_length: Optional[int] = None
    type_: Optional[type] = None


@dataclass
class ValidationResult:
    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)


def as_record(candidate: Union[BaseModel, Mapping[str, Any], None]) -> Dict[str, Any]:
    """Return ``candidate`` as a plain dict keyed by external field names."""
    if candidate is None:
        return {}
    if isinstance(candidate, BaseModel):
        return candidate.model_dump(by_alias=True)
    return dict(candidate)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _has_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int but never a valid identifier
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def _check(name: str, value: Any, rule: FieldRule) -> Optional[str]:
    if _is_blank(value):
        if rule.required:
            return f"The {name} field is required."
        return None
    if rule.type_ is not None and not _has_type(value, rule.type_):
        type_name = _TYPE_NAMES.get(rule.type_, rule.type_.__name__)
        return f"The {name} field must be of type {type_name}."
    if rule.max_length is not None and isinstance(value, str) and len(value) > rule.max_length:
        return f"The {name} field must be at most {rule.max_length} characters long."
    return None


def validate(
    record: Union[BaseModel, Mapping[str, Any], None],
    rules: Mapping[str, FieldRule],
) -> ValidationResult:
    """Check ``record`` against ``rules``.

    ``record`` may be a mapping or a Pydantic model; models are dumped
    by alias so rule names match the wire names.  Fields without a rule
    are ignored.
    """
    values = as_record(record)
    errors: Dict[str, str] = {}
    for name, rule in rules.items():
        reason = _check(name, values.get(name), rule)
        if reason is not None:
            errors[name] = reason
    return ValidationResult(valid=not errors, errors=errors)


def new_session_rules(settings: Settings = default_settings) -> Dict[str, FieldRule]:
    return {
        "sessionName": FieldRule(
            required=True, type_=str, max_length=settings.session_name_max_length
        ),
    }


def new_idea_rules(settings: Settings = default_settings) -> Dict[str, FieldRule]:
    return {
        "sessionId": FieldRule(required=True, type_=int),
        "name": FieldRule(required=True, type_=str, max_length=settings.idea_name_max_length),
        "description": FieldRule(type_=str, max_length=settings.idea_description_max_length),
    }


SESSION_ID_RULES = {"sessionId": FieldRule(required=True, type_=int)}
NEW_SESSION_RULES = new_session_rules()
NEW_IDEA_RULES = new_idea_rules()
