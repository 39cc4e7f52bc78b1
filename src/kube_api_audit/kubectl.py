"""
Kubectl invocation and Kubernetes resource JSON helpers.

All cluster access goes through subprocess kubectl calls, so kubeconfig and
context resolution stay with kubectl. This module provides a small wrapper
and helpers to fetch resources as JSON and read their annotations.
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)


def kube_flags(context: Optional[str] = None, kubeconfig: Optional[str] = None) -> list[str]:
    """Global kubectl flags selecting the kubeconfig file and context."""
    flags: list[str] = []
    if kubeconfig:
        flags.extend(["--kubeconfig", kubeconfig])
    if context:
        flags.extend(["--context", context])
    return flags


def run_kubectl(
    args: list[str],
    context: Optional[str] = None,
    kubeconfig: Optional[str] = None,
) -> subprocess.CompletedProcess:
    """
    Run kubectl with the given args.

    Args:
        args: List of arguments (e.g. ["get", "deployments.apps", "-A", "-o", "json"]).
        context: Optional kubeconfig context name.
        kubeconfig: Optional path to a kubeconfig file.

    Returns:
        CompletedProcess with returncode, stdout, stderr. Times out after 60s.
    """
    cmd = ["kubectl"] + kube_flags(context, kubeconfig) + args
    logger.debug("Running %s", " ".join(cmd))
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        timeout=60,
    )


def kubectl_get_json(
    resource: str,
    namespace: Optional[str] = None,
    cluster_scoped: bool = False,
    context: Optional[str] = None,
    kubeconfig: Optional[str] = None,
) -> Optional[dict]:
    """
    List a resource type as JSON.

    Args:
        resource: Resource name as kubectl accepts it, e.g. "deployments.apps".
        namespace: Optional namespace; used only for namespaced resources.
        cluster_scoped: If True, use neither -n nor -A.
        context: Optional kubeconfig context name.
        kubeconfig: Optional path to a kubeconfig file.

    Returns:
        Parsed JSON dict (List-style with "items"), or None when kubectl is
        missing, times out, exits non-zero, or prints invalid JSON.
    """
    args = ["get", resource, "-o", "json"]
    if cluster_scoped:
        pass
    elif namespace:
        args.extend(["-n", namespace])
    else:
        args.append("-A")
    try:
        result = run_kubectl(args, context=context, kubeconfig=kubeconfig)
    except FileNotFoundError:
        logger.error("kubectl not found on PATH")
        return None
    except subprocess.TimeoutExpired:
        logger.warning("kubectl get %s timed out", resource)
        return None
    if result.returncode != 0 or not result.stdout:
        logger.warning(
            "kubectl get %s failed (exit %s): %s",
            resource,
            result.returncode,
            (result.stderr or "").strip(),
        )
        return None
    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError:
        logger.warning("kubectl get %s returned invalid JSON", resource)
        return None


def list_items(obj: dict) -> list[dict]:
    """
    Return the items of a kubectl list response.

    Non-dict items are dropped; a response without "items" yields nothing.
    """
    return [i for i in obj.get("items") or [] if isinstance(i, dict)]


def annotation(item: dict, key: str) -> str:
    """Value of metadata.annotations[key], or "" when absent."""
    annotations = (item.get("metadata") or {}).get("annotations") or {}
    return annotations.get(key) or ""
