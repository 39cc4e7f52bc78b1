"""Shared fixtures: fake kubectl list responses."""

import json

import pytest

from kube_api_audit.config import LAST_APPLIED_ANNOTATION


def make_item(name, namespace="default", applied=None, raw=None):
    """Build a listed object; applied is the last-applied manifest dict, raw a literal annotation."""
    meta = {"name": name}
    if namespace:
        meta["namespace"] = namespace
    if applied is not None:
        raw = json.dumps(applied)
    if raw is not None:
        meta["annotations"] = {LAST_APPLIED_ANNOTATION: raw}
    return {"metadata": meta}


@pytest.fixture
def fake_cluster(monkeypatch):
    """
    Replace kubectl listing in the collector with a dict keyed by kubectl resource.

    A resource mapped to None simulates a failed listing; a missing resource lists
    no items. Each call is recorded in fake_cluster.calls.
    """

    class FakeCluster:
        def __init__(self):
            self.lists = {}
            self.calls = []

        def get(self, resource, namespace=None, cluster_scoped=False, context=None, kubeconfig=None):
            self.calls.append(
                {
                    "resource": resource,
                    "namespace": namespace,
                    "cluster_scoped": cluster_scoped,
                    "context": context,
                    "kubeconfig": kubeconfig,
                }
            )
            if resource in self.lists and self.lists[resource] is None:
                return None
            return {"kind": "List", "items": self.lists.get(resource, [])}

    cluster = FakeCluster()
    monkeypatch.setattr("kube_api_audit.collector.kubectl_get_json", cluster.get)
    return cluster
