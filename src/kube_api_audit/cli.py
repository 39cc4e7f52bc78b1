"""
CLI entry point for kube-api-audit.

Parses options and arguments, then delegates to collect() and the report
helpers. Run after setting cluster context, or pass --context.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .collector import collect
from .config import (
    ALL_KINDS,
    EXIT_FINDINGS,
    EXIT_OK,
    EXIT_WRITE_FAILED,
    KIND_ALIASES,
    RESULTS_DIR_ENVVAR,
)
from .registry import lookup_rule, tracked_kinds
from .report import ReportError, render_json, render_table, write_results

# Shown at the bottom of kube-api-audit --help / kube-api-audit -h
EPILOG = """
Examples:

  kube-api-audit                          # Audit all tracked kinds in all namespaces
  kube-api-audit deploy                   # Only deployments
  kube-api-audit -n app                   # Only namespace app (PodSecurityPolicies are cluster-wide)
  kube-api-audit -o json                  # Print findings as a JSON array
  kube-api-audit --results-dir /tmp/results
                                          # Also write results and a 'done' sentinel
  kube-api-audit --list-rules             # Show which API versions are flagged

Run after setting cluster context, or pass --context.
"""


class _EchoHandler(logging.Handler):
    """Write log records to whatever stderr click currently targets."""

    def emit(self, record: logging.LogRecord) -> None:
        click.echo(self.format(record), err=True)


def _configure_logging(verbose: bool) -> None:
    """Set the package log level and attach exactly one stderr handler."""
    pkg_logger = logging.getLogger("kube_api_audit")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, _EchoHandler):
            pkg_logger.removeHandler(handler)
    handler = _EchoHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)


def _print_rules() -> None:
    for kind in tracked_kinds():
        rule = lookup_rule(kind)
        deprecated = ", ".join(sorted(rule.deprecated_versions))
        click.echo(f"  {kind.value:<18} {deprecated}  ->  {rule.replacement_version}")


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.option(
    "-n",
    "--namespace",
    "namespace",
    metavar="NS",
    help="Limit namespaced kinds to namespace NS",
)
@click.option("--context", "kube_context", default=None, help="Kubeconfig context to use")
@click.option("--kubeconfig", default=None, help="Path to kubeconfig")
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option(
    "--results-dir",
    type=click.Path(file_okay=False),
    envvar=RESULTS_DIR_ENVVAR,
    default=None,
    help="Write the JSON results and a 'done' sentinel to this directory",
)
@click.option(
    "--fail-on-findings",
    is_flag=True,
    help=f"Exit {EXIT_FINDINGS} if any object uses a deprecated API version",
)
@click.option(
    "--list-rules",
    is_flag=True,
    help="Print the deprecated API versions checked per kind and exit",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log kubectl calls and per-kind progress",
)
@click.argument(
    "kind",
    type=click.Choice(list(KIND_ALIASES), case_sensitive=False),
    required=False,
)
def main(
    namespace: Optional[str],
    kube_context: Optional[str],
    kubeconfig: Optional[str],
    output_format: str,
    results_dir: Optional[str],
    fail_on_findings: bool,
    list_rules: bool,
    verbose: bool,
    kind: Optional[str],
) -> None:
    """
    Find objects whose last-applied apiVersion is deprecated.

    Reads the kubectl.kubernetes.io/last-applied-configuration annotation of
    every tracked object and reports the API version to migrate to. Kind is
    optional; when omitted, all tracked kinds are audited.
    """
    _configure_logging(verbose)

    if list_rules:
        _print_rules()
        sys.exit(EXIT_OK)

    kinds = [KIND_ALIASES[kind.lower()]] if kind else ALL_KINDS
    result = collect(
        kinds,
        namespace=namespace or None,
        context=kube_context,
        kubeconfig=kubeconfig,
    )

    if output_format == "json":
        click.echo(render_json(result.findings))
        if result.failed_kinds:
            click.echo(f"Could not list: {', '.join(result.failed_kinds)}", err=True)
    else:
        click.echo(render_table(result))

    if results_dir:
        try:
            write_results(result.findings, results_dir)
        except ReportError as exc:
            click.echo(str(exc), err=True)
            sys.exit(EXIT_WRITE_FAILED)

    if fail_on_findings and result.findings:
        sys.exit(EXIT_FINDINGS)
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
