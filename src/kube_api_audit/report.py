"""
Render and persist audit results.

render_json() produces the result document (a JSON array of findings),
render_table() a terminal summary, and write_results() stores the document
followed by the completion sentinel.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Union

from .collector import AuditResult
from .config import BOLD, DONE_FILE_NAME, RESULTS_FILE_NAME, SGR0
from .evaluator import Finding

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Results or the completion sentinel could not be written."""


def render_json(findings: Iterable[Finding]) -> str:
    """Result document: a JSON array of finding dicts, empty when nothing was found."""
    return json.dumps([f.to_dict() for f in findings], indent=2)


def render_table(result: AuditResult) -> str:
    """Aligned KIND | NAMESPACE | NAME | DEPRECATED API | NEW API table."""
    lines = ["", f"{BOLD}Objects last applied with deprecated API versions{SGR0}"]
    lines.append("----------------------------------------")
    if not result.findings:
        lines.append("  (none found)")
    else:
        headers = ("KIND", "NAMESPACE", "NAME", "DEPRECATED API", "NEW API")
        rows = [
            (f.kind, f.namespace or "-", f.name, f.deprecated_api, f.new_api)
            for f in result.findings
        ]
        widths = [max(len(h), max(len(r[i]) for r in rows)) for i, h in enumerate(headers)]
        fmt = "  " + "  ".join(f"{{{i}:<{w}}}" for i, w in enumerate(widths))
        lines.append(fmt.format(*headers).rstrip())
        lines.append(("  " + "  ".join("-" * w for w in widths)).rstrip())
        for row in rows:
            lines.append(fmt.format(*row).rstrip())
    if result.failed_kinds:
        lines.append(f"  Could not list: {', '.join(result.failed_kinds)}")
    lines.append("")
    return "\n".join(lines)


def write_results(findings: Iterable[Finding], results_dir: Union[str, Path]) -> Path:
    """
    Write the findings document, then the completion sentinel.

    The sentinel is only written once the results file is in place; its
    content is the results file path.

    Raises:
        ReportError: if the directory or either file cannot be written.
    """
    out_dir = Path(results_dir)
    results_path = out_dir / RESULTS_FILE_NAME
    done_path = out_dir / DONE_FILE_NAME
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        results_path.write_text(render_json(findings))
    except OSError as exc:
        raise ReportError(f"Cannot write results to {results_path}: {exc}") from exc
    try:
        done_path.write_text(str(results_path))
    except OSError as exc:
        raise ReportError(f"Cannot write 'done' file {done_path}: {exc}") from exc
    logger.info("Wrote %s and %s", results_path, done_path)
    return results_path
