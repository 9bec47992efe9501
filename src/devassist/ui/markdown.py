"""Markdown renderer for DevAssist reports."""

from __future__ import annotations

from devassist.assist import AssistReport


def render_report(report: AssistReport) -> str:
    """Render a report as GitHub-flavored markdown."""
    sections: list[str] = []

    sections.append("## DevAssist: Merged Pull Requests")
    sections.append("")

    if report.record is None:
        sections.append("> Record context unavailable, no metadata paths inferred.")
        sections.append("")
        sections.append(_footer())
        return "\n".join(sections)

    record_type = report.record.record_type or "-"
    sections.append("| Object | Record Type | Profile | Paths | Pull Requests |")
    sections.append("|:-------|:------------|:--------|:-----:|:-------------:|")
    sections.append(
        f"| `{report.record.object_name}` | "
        f"{record_type} | "
        f"{report.profile or '-'} | "
        f"{len(report.paths)} | "
        f"{len(report.result)} |"
    )
    sections.append("")

    if not report.result.pull_requests:
        sections.append("> No merged pull requests touched these paths.")
        sections.append("")
    else:
        for pr in report.result.pull_requests:
            merged = pr.merged_at.strftime("%Y-%m-%d") if pr.merged_at else "unknown"
            title = f"[{pr.title}]({pr.url})" if pr.url else pr.title
            sections.append(f"### #{pr.number} {title}")
            sections.append("")
            sections.append(f"Merged {merged}, matched `{pr.source_path}`")
            sections.append("")
            for link in pr.file_links:
                sections.append(f"- [{link.name}]({link.url})")
            sections.append("")

    if report.result.failures:
        sections.append("<details>")
        sections.append(f"<summary>{len(report.result.failures)} lookup(s) failed</summary>")
        sections.append("")
        for failure in report.result.failures:
            sections.append(f"- `{failure.path}`: {failure.error}")
        sections.append("")
        sections.append("</details>")
        sections.append("")

    sections.append(_footer())
    return "\n".join(sections)


def _footer() -> str:
    return "---\n*Generated by DevAssist*"
