"""The report command — sequences probe, parse, render and persist.

This module lives in the CLI layer: it prints via the console proxies
and owns the recoverable failures of a run (unavailable runtime,
unwritable report file).  Parsing and rendering are delegated to the
core layer.
"""

from __future__ import annotations

import logging
from datetime import datetime

from docker_report.cli import exit_codes
from docker_report.cli.console import console, out
from docker_report.config import ReportConfig
from docker_report.core.renderer import (
    render_container_table,
    render_file_report,
    render_image_table,
    render_summary,
    summarize,
)
from docker_report.core.report_service import ReportService
from docker_report.exceptions import ReportWriteError, RuntimeUnavailableError
from docker_report.infra.report_writer import write_report

logger = logging.getLogger(__name__)

BANNER_RULE: str = "=" * 49
SECTION_RULE: str = "-" * 49


def _print_banner() -> None:
    out.print(BANNER_RULE)
    out.print("           DOCKER SYSTEM REPORT", style="bold")
    out.print(BANNER_RULE)
    out.print()


def _print_section(title: str, body: str) -> None:
    out.print(title, style="bold cyan")
    out.print(SECTION_RULE)
    out.print(body)
    out.print()


def run_report(
    service: ReportService,
    config: ReportConfig,
    *,
    now: datetime | None = None,
) -> int:
    """Generate the console report and the report file.

    Parameters
    ----------
    service:
        Service bound to the runtime to query.
    config:
        Supplies the report file path.
    now:
        Timestamp written into the file report.  Defaults to the
        current local time.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` — also when the runtime is
        unavailable, which ends the run early without a report file.
    """
    _print_banner()

    try:
        snapshot = service.collect()
    except RuntimeUnavailableError as exc:
        out.print(f"❌ {exc}", style="bold red")
        if exc.hint:
            out.print(exc.hint)
        return exit_codes.SUCCESS

    out.print(f"✅ {service.display_name} is available on this system.", style="green")
    out.print()

    _print_section("📦 CONTAINER REPORT", render_container_table(snapshot.containers))
    _print_section("🖼️  IMAGE REPORT", render_image_table(snapshot.images))

    summary = summarize(snapshot.containers, snapshot.images, snapshot.runtime_version)
    _print_section("📊 SYSTEM SUMMARY", render_summary(summary))

    generated_at = now if now is not None else datetime.now()
    report_text = render_file_report(
        snapshot.containers,
        snapshot.images,
        generated_at=generated_at,
    )
    try:
        path = write_report(config.report_path, report_text)
    except ReportWriteError as exc:
        logger.debug("Report file not written: %r", exc)
        console.print(f"❌ {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
    else:
        out.print(f"📄 Detailed report saved to: {path}")
        out.print()

    out.print("Report generation completed successfully! ✅", style="bold green")
    return exit_codes.SUCCESS
