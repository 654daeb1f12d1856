"""
Validation of runtime options and regions.

Each ``check_*`` function returns the list of failures found in a candidate
fragment; the matching ``validate_*`` function raises InvalidConfigError when
that list is not empty.
"""

import numbers
from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from config import (
    MAX_TIMEOUT_SECONDS,
    MIN_TIMEOUT_SECONDS,
    RUNTIME_OPTION_FIELDS,
    SUPPORTED_REGIONS,
    VALID_MEMORY_OPTIONS,
)
from errors import InvalidConfigError, ValidationFailure

FieldCheck = Callable[[Any], List[ValidationFailure]]


def _check_failure_policy(value: Any) -> List[ValidationFailure]:
    if isinstance(value, bool):
        return []
    if not isinstance(value, Mapping):
        return [
            ValidationFailure(
                "RuntimeOptions.failure_policy",
                "must be a boolean or an object",
                value,
            )
        ]
    retry = value.get("retry")
    if not isinstance(retry, Mapping) or len(retry) != 0:
        return [
            ValidationFailure(
                "RuntimeOptions.failure_policy.retry",
                "must be an empty object",
                retry,
            )
        ]
    return []


def _check_memory(value: Any) -> List[ValidationFailure]:
    if isinstance(value, str) and value in VALID_MEMORY_OPTIONS:
        return []
    return [
        ValidationFailure(
            "RuntimeOptions.memory",
            "must be one of",
            value,
            VALID_MEMORY_OPTIONS,
        )
    ]


def _check_timeout_seconds(value: Any) -> List[ValidationFailure]:
    # bool is an int subclass but never a meaningful timeout; complex has no order
    if isinstance(value, (bool, complex)) or not isinstance(value, numbers.Number):
        return [
            ValidationFailure(
                "RuntimeOptions.timeout_seconds", "must be a number", value
            )
        ]
    # NaN compares unequal to itself; Decimal NaN refuses ordering outright
    if value != value or not MIN_TIMEOUT_SECONDS <= value <= MAX_TIMEOUT_SECONDS:
        return [
            ValidationFailure(
                "RuntimeOptions.timeout_seconds",
                f"must be between {MIN_TIMEOUT_SECONDS} and {MAX_TIMEOUT_SECONDS}",
                value,
            )
        ]
    return []


RUNTIME_OPTION_CHECKS: Dict[str, FieldCheck] = {
    "failure_policy": _check_failure_policy,
    "memory": _check_memory,
    "timeout_seconds": _check_timeout_seconds,
}


def check_runtime_options(candidate: Any) -> List[ValidationFailure]:
    """
    Check a runtime options fragment.

    Only fields present in the fragment are checked.

    Args:
        candidate: Value supplied to ``run_with``

    Returns:
        List of failures, empty when the fragment is valid
    """
    if not isinstance(candidate, Mapping):
        return [ValidationFailure("RuntimeOptions", "must be an object", candidate)]

    failures: List[ValidationFailure] = []
    unknown = [key for key in candidate if key not in RUNTIME_OPTION_CHECKS]
    if unknown:
        failures.append(
            ValidationFailure(
                "RuntimeOptions",
                f"has unknown fields {unknown}; valid fields are",
                unknown,
                RUNTIME_OPTION_FIELDS,
            )
        )

    for name, check in RUNTIME_OPTION_CHECKS.items():
        if name in candidate:
            failures.extend(check(candidate[name]))
    return failures


def validate_runtime_options(candidate: Any) -> None:
    """
    Assert that the runtime options passed in are valid.

    Raises:
        InvalidConfigError: failure_policy, memory and timeout_seconds must be
            valid and no other field may be present.
    """
    failures = check_runtime_options(candidate)
    if failures:
        raise InvalidConfigError(failures)


def check_regions(candidate: Any) -> List[ValidationFailure]:
    """Check a list of regions against SUPPORTED_REGIONS."""
    if isinstance(candidate, (str, bytes)) or not isinstance(candidate, (list, tuple)):
        return [ValidationFailure("regions", "must be a list of region names", candidate)]

    if len(candidate) == 0:
        return [ValidationFailure("regions", "must contain at least one region", [])]

    invalid = []
    for region in candidate:
        if region not in SUPPORTED_REGIONS and region not in invalid:
            invalid.append(region)
    if invalid:
        return [
            ValidationFailure(
                "regions",
                f"contains unsupported regions {invalid}; the only valid regions are",
                invalid,
                SUPPORTED_REGIONS,
            )
        ]
    return []


def validate_regions(candidate: Any) -> None:
    """
    Assert regions specified are valid.

    Raises:
        InvalidConfigError: Regions must be in the list of supported regions.
    """
    failures = check_regions(candidate)
    if failures:
        raise InvalidConfigError(failures)

