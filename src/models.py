"""
Data models for Cloud Function deployment options.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from numbers import Number
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

DEPLOYMENT_OPTION_FIELDS = ("regions", "failure_policy", "memory", "timeout_seconds")


class FailurePolicyKind(Enum):
    """How a background function reacts to a failed invocation."""

    DISABLED = "disabled"
    RETRY_DEFAULT = "retry_default"
    RETRY_WITH_POLICY = "retry_with_policy"


@dataclass(frozen=True)
class FailurePolicy:
    """Failure policy of a function.

    ``True`` and ``{"retry": {}}`` both mean RETRY_DEFAULT. RETRY_WITH_POLICY
    is reserved for retry tunables; populated retry objects are rejected by
    the validators until those exist.
    """

    kind: FailurePolicyKind
    retry: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def disabled(cls) -> "FailurePolicy":
        return cls(FailurePolicyKind.DISABLED)

    @classmethod
    def retry_default(cls) -> "FailurePolicy":
        return cls(FailurePolicyKind.RETRY_DEFAULT)

    @classmethod
    def from_value(cls, value: Union[bool, Mapping[str, Any], "FailurePolicy"]) -> "FailurePolicy":
        """Build a policy from an already validated option value."""
        if isinstance(value, FailurePolicy):
            return value
        if isinstance(value, bool):
            return cls.retry_default() if value else cls.disabled()
        retry = dict(value["retry"])
        if not retry:
            return cls.retry_default()
        return cls(FailurePolicyKind.RETRY_WITH_POLICY, retry)

    @property
    def retries(self) -> bool:
        return self.kind is not FailurePolicyKind.DISABLED

    def to_value(self) -> Union[bool, Dict[str, Any]]:
        if self.kind is FailurePolicyKind.DISABLED:
            return False
        return {"retry": dict(self.retry)}


@dataclass(frozen=True)
class DeploymentOptions:
    """Snapshot of the options a function is deployed with.

    ``None`` means the field was never set.
    """

    regions: Optional[Tuple[str, ...]] = None
    failure_policy: Optional[FailurePolicy] = None
    memory: Optional[str] = None
    timeout_seconds: Optional[Number] = None

    def with_regions(self, regions: Sequence[str]) -> "DeploymentOptions":
        return merge(self, {"regions": regions})

    def with_runtime_options(self, runtime_options: Mapping[str, Any]) -> "DeploymentOptions":
        return merge(self, runtime_options)

    def to_dict(self) -> Dict[str, Any]:
        """Return the fields that are set, in their option-fragment form."""
        data: Dict[str, Any] = {}
        if self.regions is not None:
            data["regions"] = list(self.regions)
        if self.failure_policy is not None:
            data["failure_policy"] = self.failure_policy.to_value()
        if self.memory is not None:
            data["memory"] = self.memory
        if self.timeout_seconds is not None:
            data["timeout_seconds"] = self.timeout_seconds
        return data


def merge(base: DeploymentOptions, fragment: Mapping[str, Any]) -> DeploymentOptions:
    """
    Apply a validated fragment on top of a snapshot.

    Every field present in the fragment replaces the base value; fields the
    fragment does not mention are kept. Lists are replaced, never appended.

    Args:
        base: Current snapshot
        fragment: Mapping keyed by DeploymentOptions field names

    Returns:
        A new DeploymentOptions instance
    """
    changes: Dict[str, Any] = {}
    for name in DEPLOYMENT_OPTION_FIELDS:
        if name not in fragment:
            continue
        value = fragment[name]
        if name == "regions":
            value = tuple(value)
        elif name == "failure_policy":
            value = FailurePolicy.from_value(value)
        changes[name] = value
    return dataclasses.replace(base, **changes)
