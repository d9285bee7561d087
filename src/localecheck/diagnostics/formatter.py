"""Report formatting service.

Renders source reports and run summaries as indented text, one line per
event, or JSON for tooling integration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from localecheck.constants import INDENT_WIDTH, MAX_DETAIL_LENGTH
from localecheck.enums import EventKind

if TYPE_CHECKING:
    from localecheck.checking import CheckSummary, SourceReport

    from .events import CheckEvent

__all__ = [
    "OutputFormat",
    "ReportFormatter",
]


class OutputFormat(StrEnum):
    """Output format options for report formatting."""

    TEXT = "text"  # Indented, grouped by source and resource (default)
    SIMPLE = "simple"  # Single line per event
    JSON = "json"  # JSON document for tooling integration


@dataclass(frozen=True, slots=True)
class ReportFormatter:
    """Report formatting service.

    Attributes:
        output_format: Output style (text, simple, json)
        sanitize: Truncate event details to max_content_length
        max_content_length: Maximum detail length when sanitizing

    Example:
        >>> from localecheck.checking import CheckSummary, SourceReport
        >>> from localecheck.diagnostics import CheckEvent
        >>> event = CheckEvent(EventKind.MISSING_KEY, "Messages", "de", "greeting")
        >>> summary = CheckSummary((SourceReport("Messages", (event,)),))
        >>> formatter = ReportFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format_summary(summary))
        error[MISSING_KEY] Messages [de]: Missing key [greeting]
        1 errors, 0 warnings
    """

    output_format: OutputFormat = OutputFormat.TEXT
    sanitize: bool = False
    max_content_length: int = MAX_DETAIL_LENGTH

    def format_summary(self, summary: CheckSummary) -> str:
        """Format all reports of a run followed by the totals."""
        match self.output_format:
            case OutputFormat.TEXT:
                parts = [self._format_text(r) for r in summary.reports]
                parts.append(self._totals(summary.error_count, summary.warning_count))
                return "\n".join(parts)
            case OutputFormat.SIMPLE:
                lines = [line for r in summary.reports for line in self._format_simple(r)]
                lines.append(self._totals(summary.error_count, summary.warning_count))
                return "\n".join(lines)
            case OutputFormat.JSON:
                return self._format_json(summary)

    def format_report(self, report: SourceReport) -> str:
        """Format one source report without totals."""
        match self.output_format:
            case OutputFormat.TEXT:
                return self._format_text(report)
            case OutputFormat.SIMPLE:
                return "\n".join(self._format_simple(report))
            case OutputFormat.JSON:
                import json  # noqa: PLC0415

                return json.dumps(self._report_data(report), ensure_ascii=False)

    def format_event(self, event: CheckEvent) -> str:
        """Format one event as a single line."""
        description = self._maybe_sanitize(event.describe())
        locale = event.locale or "default"
        return f"{event.severity}[{event.code.name}] {event.source} [{locale}]: {description}"

    @staticmethod
    def _totals(errors: int, warnings: int) -> str:
        return f"{errors} errors, {warnings} warnings"

    @staticmethod
    def _indent(depth: int) -> str:
        return " " * (depth * INDENT_WIDTH)

    def _format_text(self, report: SourceReport) -> str:
        """Format report grouped by resource, listing every resource.

        Example output:
            Checking Messages
              Checking Messages.properties
              Checking Messages_de.properties
                Invalid format [greeting]: Unknown format conversion 'k'
                  = help: Escape a literal percent sign as %%
              Missing Messages_fr.properties
        """
        lines = [f"Checking {report.source}"]
        if report.fatal is not None:
            lines.append(f"{self._indent(1)}error: {report.fatal}")

        located = {o.resource_name: o.locale for o in report.outcomes}
        located_locales = set(located.values())
        missing: dict[str, CheckEvent] = {}
        by_locale: dict[str, list[CheckEvent]] = {}
        for event in report.events:
            if event.kind is EventKind.MISSING_LOCALE_FILE:
                missing[event.key] = event
            elif event.locale in located_locales:
                by_locale.setdefault(event.locale, []).append(event)
            else:
                # Nothing was located to nest under (empty base resource)
                lines.extend(self._text_event(event, 1))

        for name in dict.fromkeys((*report.resource_names, *located, *missing)):
            if name in missing:
                lines.extend(self._text_event(missing[name], 1))
            elif name in located:
                lines.append(f"{self._indent(1)}Checking {name}")
                for event in by_locale.get(located[name], ()):
                    lines.extend(self._text_event(event, 2))
        return "\n".join(lines)

    def _text_event(self, event: CheckEvent, depth: int) -> list[str]:
        lines = [f"{self._indent(depth)}{self._describe(event)}"]
        if event.diagnostic is not None and event.diagnostic.hint:
            lines.append(f"{self._indent(depth + 1)}= help: {event.diagnostic.hint}")
        return lines

    def _format_simple(self, report: SourceReport) -> list[str]:
        lines = [self.format_event(e) for e in report.events]
        if report.fatal is not None:
            lines.insert(0, f"error[FATAL] {report.source}: {report.fatal}")
        return lines

    def _describe(self, event: CheckEvent) -> str:
        text = self._maybe_sanitize(event.describe())
        if event.kind is EventKind.UNUSED_KEY:
            return f"warning: {text}"
        return text

    def _report_data(self, report: SourceReport) -> dict[str, object]:
        data: dict[str, object] = {
            "source": report.source,
            "passed": report.passed,
            "errors": report.error_count,
            "warnings": report.warning_count,
            "fatal": str(report.fatal) if report.fatal is not None else None,
            "events": [
                {
                    "kind": e.kind.value,
                    "code": e.code.name,
                    "code_value": e.code.value,
                    "severity": e.severity.value,
                    "locale": e.locale,
                    "key": e.key,
                    "message": self._maybe_sanitize(e.describe()),
                    "hint": e.diagnostic.hint if e.diagnostic is not None else None,
                    "position": e.diagnostic.position if e.diagnostic is not None else None,
                }
                for e in report.events
            ],
            "resources": [
                {
                    "locale": o.locale,
                    "resource": o.resource_name,
                    "keys": o.original_size,
                    "consumed": o.consumed,
                    "unused": o.residual,
                }
                for o in report.outcomes
            ],
        }
        return data

    def _format_json(self, summary: CheckSummary) -> str:
        """Format summary as JSON.

        Example output:
            {"passed": false, "errors": 1, "warnings": 0, "sources": [...]}
        """
        import json  # noqa: PLC0415

        data = {
            "passed": summary.passed,
            "errors": summary.error_count,
            "warnings": summary.warning_count,
            "sources": [self._report_data(r) for r in summary.reports],
        }
        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, content: str) -> str:
        """Truncate content if sanitization is enabled."""
        if self.sanitize and len(content) > self.max_content_length:
            return content[: self.max_content_length] + "..."
        return content
