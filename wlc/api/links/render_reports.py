"""Report documents written into the vault."""

from collections.abc import Sequence
from datetime import datetime

from ...templating import render_template
from ..vault.Document import Document
from .ScanReport import ScanReport

BROKEN_LINKS_TEMPLATE = """\
# Broken links report

Generated: {{ generated }}
Total broken links: {{ report.total_broken }}
Total links checked: {{ report.total_links_checked }}

## Broken links:

{% for key, paths in report.broken.items() %}
- {{ key }} in [[{{ paths | join(']], [[') }}]]
{% endfor %}
"""

FILES_TEMPLATE = """\
# {{ title }}

Generated: {{ generated }}
Total: {{ documents | length }} files

## {{ heading }}

{% for document in documents %}
- [[{{ document.basename }}]] ({{ document.path }})
{% endfor %}
"""

ORPHAN_REPORT_TITLE = "Orphan files report"
EMPTY_REPORT_TITLE = "Empty files report"


def _timestamp(generated: datetime | None) -> str:
    # Locale's date and time representation
    return (generated or datetime.now()).strftime("%c")


def render_broken_links_report(report: ScanReport, generated: datetime | None = None) -> str:
    """Render the broken links report read back by ``parse_broken_links``."""
    return render_template(BROKEN_LINKS_TEMPLATE, {"report": report, "generated": _timestamp(generated)})


def render_files_report(
    title: str, heading: str, documents: Sequence[Document], generated: datetime | None = None
) -> str:
    """Render an orphan or empty files report."""
    return render_template(
        FILES_TEMPLATE,
        {"title": title, "heading": heading, "documents": documents, "generated": _timestamp(generated)},
    )


def dated_report_name(title: str, day: datetime | None = None) -> str:
    """``<title> YYYY-MM-DD.md`` at the vault root."""
    return f"{title} {(day or datetime.now()).strftime('%Y-%m-%d')}.md"
