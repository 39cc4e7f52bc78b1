"""Turn one object's declared apiVersion into a migration finding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .registry import Kind, lookup_rule


@dataclass(frozen=True)
class Finding:
    """An object whose last-applied manifest used a deprecated API version."""

    namespace: str
    name: str
    deprecated_api: str
    new_api: str
    kind: str = ""

    def to_dict(self) -> dict[str, str]:
        """Result document shape: namespace, name, deprecatedAPI, newAPI."""
        return {
            "namespace": self.namespace,
            "name": self.name,
            "deprecatedAPI": self.deprecated_api,
            "newAPI": self.new_api,
        }


def evaluate(
    kind: Union[Kind, str],
    namespace: str,
    name: str,
    declared_version: str,
) -> Optional[Finding]:
    """
    Return a Finding if declared_version is deprecated for kind, else None.

    Untracked kinds, an empty declared_version, and versions the registry does
    not list as deprecated all yield None. Comparison is exact string equality.
    """
    rule = lookup_rule(kind)
    if rule is None or not declared_version:
        return None
    if declared_version not in rule.deprecated_versions:
        return None
    return Finding(
        namespace=namespace,
        name=name,
        deprecated_api=declared_version,
        new_api=rule.replacement_version,
        kind=rule.kind.value,
    )
