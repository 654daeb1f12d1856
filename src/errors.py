"""
Exceptions raised while building Cloud Function deployment options.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class ValidationFailure:
    """A single rejected field in a configuration fragment."""

    field: str  # dotted path, e.g. "RuntimeOptions.failure_policy.retry"
    reason: str
    value: Any = None
    allowed: Optional[Sequence[Any]] = None

    @property
    def message(self) -> str:
        if self.allowed is not None:
            return f"{self.field} {self.reason}: {', '.join(map(str, self.allowed))}."
        return f"{self.field} {self.reason}."

    def to_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation of the failure."""
        data = asdict(self)
        if self.allowed is not None:
            data["allowed"] = list(self.allowed)
        data["message"] = self.message
        return data


class InvalidConfigError(ValueError):
    """Raised when deployment options fail validation."""

    def __init__(self, failures: List[ValidationFailure]):
        self.failures = list(failures)
        super().__init__(" ".join(f.message for f in self.failures))

    @classmethod
    def single(
        cls,
        field: str,
        reason: str,
        value: Any = None,
        allowed: Optional[Sequence[Any]] = None,
    ) -> "InvalidConfigError":
        return cls([ValidationFailure(field, reason, value, allowed)])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": "InvalidConfigError",
            "failures": [f.to_dict() for f in self.failures],
        }


class ProjectNotFoundError(RuntimeError):
    """Raised when no GCP project id can be resolved for a trigger resource."""
