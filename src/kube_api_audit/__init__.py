"""
kube_api_audit: Find cluster objects last applied with deprecated API versions.

Lists networkpolicies, podsecuritypolicies, daemonsets, deployments,
statefulsets and replicasets, reads the apiVersion recorded in each object's
last-applied-configuration annotation, and reports which objects should be
migrated to a newer API version.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
