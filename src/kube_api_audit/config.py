"""
Constants and resource type definitions for kube-api-audit.

Defines ANSI codes for output formatting, the annotation and result file
names, exit codes, and the Kubernetes workload kinds (and CLI aliases)
that kube-api-audit lists and checks.
"""

# ANSI escape sequences for terminal output
BOLD = "\033[1m"   # Start bold
SGR0 = "\033[0m"   # Reset (end bold)

# Annotation written by `kubectl apply` holding the last applied manifest as JSON.
LAST_APPLIED_ANNOTATION = "kubectl.kubernetes.io/last-applied-configuration"

# Result persistence: <results-dir>/results holds the JSON findings,
# <results-dir>/done is written last and contains the results file path.
RESULTS_FILE_NAME = "results"
DONE_FILE_NAME = "done"
RESULTS_DIR_ENVVAR = "KUBE_API_AUDIT_RESULTS_DIR"

EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_FINDINGS = 3

# Tracked kinds, in the order they are audited.
ALL_KINDS = [
    "networkPolicy",
    "podSecurityPolicy",
    "deployment",
    "daemonSet",
    "statefulSet",
    "replicaSet",
]

# Resource name passed to `kubectl get` for each tracked kind. Group-qualified so
# the listing is not ambiguous when CRDs reuse a plural.
KUBECTL_RESOURCES = {
    "networkPolicy": "networkpolicies.networking.k8s.io",
    "podSecurityPolicy": "podsecuritypolicies.policy",
    "deployment": "deployments.apps",
    "daemonSet": "daemonsets.apps",
    "statefulSet": "statefulsets.apps",
    "replicaSet": "replicasets.apps",
}

# Cluster-scoped kinds (no -n or -A when fetching).
CLUSTER_SCOPED_KINDS = frozenset({"podSecurityPolicy"})

# CLI accepts singular, plural, or short names; map to the tracked kind.
KIND_ALIASES = {
    "networkpolicy": "networkPolicy",
    "networkpolicies": "networkPolicy",
    "netpol": "networkPolicy",
    "podsecuritypolicy": "podSecurityPolicy",
    "podsecuritypolicies": "podSecurityPolicy",
    "psp": "podSecurityPolicy",
    "deployment": "deployment",
    "deployments": "deployment",
    "deploy": "deployment",
    "daemonset": "daemonSet",
    "daemonsets": "daemonSet",
    "ds": "daemonSet",
    "statefulset": "statefulSet",
    "statefulsets": "statefulSet",
    "sts": "statefulSet",
    "replicaset": "replicaSet",
    "replicasets": "replicaSet",
    "rs": "replicaSet",
}
