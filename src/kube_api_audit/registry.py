"""
Deprecation registry: which API versions are deprecated for each tracked kind.

The table is built once at import time and exposed read-only through
lookup_rule(). Each kind has exactly one rule with a single replacement
version, so any deprecated match resolves to the same new API.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Union


class Kind(str, Enum):
    """Workload kinds whose last-applied apiVersion is checked."""

    NETWORK_POLICY = "networkPolicy"
    POD_SECURITY_POLICY = "podSecurityPolicy"
    DAEMON_SET = "daemonSet"
    DEPLOYMENT = "deployment"
    STATEFUL_SET = "statefulSet"
    REPLICA_SET = "replicaSet"


@dataclass(frozen=True)
class DeprecationRule:
    """Deprecated API versions of one kind and the single version to migrate to."""

    kind: Kind
    deprecated_versions: frozenset[str]
    replacement_version: str

    def __post_init__(self) -> None:
        if self.replacement_version in self.deprecated_versions:
            raise ValueError(
                f"{self.kind.value}: replacement {self.replacement_version!r} is listed as deprecated"
            )


_APPS_BETAS = frozenset({"extensions/v1beta1", "apps/v1beta1", "apps/v1beta2"})

_RULES = MappingProxyType(
    {
        rule.kind: rule
        for rule in (
            DeprecationRule(Kind.NETWORK_POLICY, frozenset({"extensions/v1beta1"}), "networking.k8s.io/v1"),
            DeprecationRule(Kind.POD_SECURITY_POLICY, frozenset({"extensions/v1beta1"}), "policy/v1beta1"),
            DeprecationRule(Kind.DAEMON_SET, _APPS_BETAS, "apps/v1"),
            DeprecationRule(Kind.DEPLOYMENT, _APPS_BETAS, "apps/v1"),
            DeprecationRule(Kind.STATEFUL_SET, _APPS_BETAS, "apps/v1"),
            DeprecationRule(Kind.REPLICA_SET, _APPS_BETAS, "apps/v1"),
        )
    }
)


def lookup_rule(kind: Union[Kind, str]) -> Optional[DeprecationRule]:
    """
    Return the deprecation rule for a kind, or None if the kind is not tracked.

    Args:
        kind: A Kind member or its string value (e.g. "deployment").
    """
    try:
        return _RULES.get(Kind(kind))
    except ValueError:
        return None


def tracked_kinds() -> list[Kind]:
    """All kinds with a rule, in registry order."""
    return list(_RULES)
