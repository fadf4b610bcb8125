"""Dashboard settings (baseline amount, monthly fixed cost) and their validation"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from cashpilot.config import settings
from cashpilot.domain.exceptions import InvalidSettingsError


class DashboardSettings(BaseModel):
    """User-editable dashboard settings"""

    baseline_amount: float = Field(default_factory=lambda: settings.default_baseline_amount, ge=0, allow_inf_nan=False)
    fixed_cost: float = Field(default_factory=lambda: settings.default_fixed_cost, ge=0, allow_inf_nan=False)


@dataclass
class ValidationResult:
    """Outcome of validating a single settings field"""

    valid: bool
    error: Optional[str] = None


def _validate_non_negative(value: float, negative_message: str) -> ValidationResult:
    if value is None or math.isnan(value):
        return ValidationResult(valid=False, error="Please enter a valid number")
    if value < 0:
        return ValidationResult(valid=False, error=negative_message)
    return ValidationResult(valid=True)


def validate_baseline_amount(value: float) -> ValidationResult:
    return _validate_non_negative(value, "Baseline cannot be negative")


def validate_fixed_cost(value: float) -> ValidationResult:
    return _validate_non_negative(value, "Fixed cost cannot be negative")


def merge_settings(current: DashboardSettings, updates: Mapping[str, Any]) -> DashboardSettings:
    """
    Apply a partial update on top of the current settings.

    Raises:
        InvalidSettingsError: the merged settings fail validation
    """
    merged = {**current.model_dump(), **{k: v for k, v in updates.items() if v is not None}}

    checks = (("baseline_amount", validate_baseline_amount), ("fixed_cost", validate_fixed_cost))
    for name, check in checks:
        value = merged.get(name)
        if isinstance(value, (int, float)):
            result = check(value)
            if not result.valid:
                raise InvalidSettingsError(f"{name}: {result.error}")

    try:
        return DashboardSettings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidSettingsError(str(exc)) from exc
