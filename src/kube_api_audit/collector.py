"""
Collection pass: list every tracked kind and evaluate each object.

Provides declared_api_version() to read the apiVersion recorded in an
object's last-applied-configuration annotation, and collect() which walks
the tracked kinds once, feeding each object to evaluate().
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .config import ALL_KINDS, CLUSTER_SCOPED_KINDS, KUBECTL_RESOURCES, LAST_APPLIED_ANNOTATION
from .evaluator import Finding, evaluate
from .kubectl import annotation, kubectl_get_json, list_items

logger = logging.getLogger(__name__)


@dataclass
class AuditResult:
    """Findings from one collection pass and the kinds that could not be listed."""

    findings: list[Finding] = field(default_factory=list)
    failed_kinds: list[str] = field(default_factory=list)


def declared_api_version(item: dict) -> str:
    """
    Return the apiVersion from the object's last-applied-configuration annotation.

    Objects never created with `kubectl apply` have no annotation. An annotation
    that is not a JSON object, or has no string apiVersion, is treated the same
    way: "" is returned and the object is skipped by the evaluator.
    """
    raw = annotation(item, LAST_APPLIED_ANNOTATION)
    if not raw:
        return ""
    meta = item.get("metadata") or {}
    try:
        applied = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning(
            "Skipping %s/%s: unparsable last-applied-configuration (%s)",
            meta.get("namespace", ""),
            meta.get("name", "?"),
            exc,
        )
        return ""
    if not isinstance(applied, dict):
        logger.warning(
            "Skipping %s/%s: last-applied-configuration is not a JSON object",
            meta.get("namespace", ""),
            meta.get("name", "?"),
        )
        return ""
    version = applied.get("apiVersion")
    return version if isinstance(version, str) else ""


def collect(
    kinds: Optional[Iterable[str]] = None,
    namespace: Optional[str] = None,
    context: Optional[str] = None,
    kubeconfig: Optional[str] = None,
) -> AuditResult:
    """
    List each tracked kind and evaluate every object found.

    Args:
        kinds: Tracked kinds to audit (defaults to ALL_KINDS). Untracked
            kinds are skipped; an empty list audits nothing.
        namespace: If set, limit namespaced kinds to this namespace.
        context: Optional kubeconfig context passed to kubectl.
        kubeconfig: Optional kubeconfig path passed to kubectl.

    Returns:
        AuditResult with findings in listing order and the kinds whose
        listing failed. A failed kind does not stop the others.
    """
    result = AuditResult()
    for kind in ALL_KINDS if kinds is None else kinds:
        if kind not in KUBECTL_RESOURCES:
            logger.debug("%s is not tracked; nothing to check", kind)
            continue
        cluster_scoped = kind in CLUSTER_SCOPED_KINDS
        obj = kubectl_get_json(
            KUBECTL_RESOURCES[kind],
            namespace=None if cluster_scoped else namespace,
            cluster_scoped=cluster_scoped,
            context=context,
            kubeconfig=kubeconfig,
        )
        if obj is None:
            logger.warning("Could not list %s; skipping", kind)
            result.failed_kinds.append(kind)
            continue
        items = list_items(obj)
        logger.debug("Listed %d %s object(s)", len(items), kind)
        for item in items:
            meta = item.get("metadata") or {}
            finding = evaluate(
                kind,
                meta.get("namespace") or "",
                meta.get("name", ""),
                declared_api_version(item),
            )
            if finding is not None:
                logger.info(
                    "%s %s/%s uses %s",
                    kind,
                    finding.namespace,
                    finding.name,
                    finding.deprecated_api,
                )
                result.findings.append(finding)
    return result
