"""Tests for kubectl helpers."""

import json
import subprocess

import pytest

from kube_api_audit import kubectl
from kube_api_audit.kubectl import annotation, kube_flags, kubectl_get_json, list_items


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(["kubectl"], returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def recorded(monkeypatch):
    calls = []
    responses = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        response = responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(kubectl.subprocess, "run", fake_run)
    return calls, responses


def test_kube_flags():
    assert kube_flags() == []
    assert kube_flags("staging", "/tmp/kc") == ["--kubeconfig", "/tmp/kc", "--context", "staging"]


def test_get_json_all_namespaces(recorded):
    calls, responses = recorded
    responses.append(_completed(stdout=json.dumps({"items": []})))
    assert kubectl_get_json("deployments.apps") == {"items": []}
    assert calls == [["kubectl", "get", "deployments.apps", "-o", "json", "-A"]]


def test_get_json_namespace_and_context(recorded):
    calls, responses = recorded
    responses.append(_completed(stdout="{}"))
    kubectl_get_json("deployments.apps", namespace="app", context="staging")
    assert calls == [["kubectl", "--context", "staging", "get", "deployments.apps", "-o", "json", "-n", "app"]]


def test_get_json_cluster_scoped_ignores_namespace(recorded):
    calls, responses = recorded
    responses.append(_completed(stdout="{}"))
    kubectl_get_json("podsecuritypolicies.policy", namespace="app", cluster_scoped=True)
    assert calls == [["kubectl", "get", "podsecuritypolicies.policy", "-o", "json"]]


@pytest.mark.parametrize(
    "response",
    [
        _completed(returncode=1, stderr="the server doesn't have a resource type"),
        _completed(stdout="not json"),
        _completed(stdout=""),
        FileNotFoundError("kubectl"),
        subprocess.TimeoutExpired("kubectl", 60),
    ],
)
def test_get_json_failures_return_none(recorded, response):
    _, responses = recorded
    responses.append(response)
    assert kubectl_get_json("podsecuritypolicies.policy", cluster_scoped=True) is None


def test_list_items():
    assert list_items({"items": [{"metadata": {"name": "a"}}, "junk"]}) == [{"metadata": {"name": "a"}}]
    assert list_items({"items": None}) == []
    assert list_items({"metadata": {"name": "a"}}) == []
    assert list_items({}) == []


def test_annotation():
    item = {"metadata": {"annotations": {"a": "1"}}}
    assert annotation(item, "a") == "1"
    assert annotation(item, "b") == ""
    assert annotation({"metadata": {}}, "a") == ""
