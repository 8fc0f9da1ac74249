"""Plain markdown rendering of a machine view (served to crawlers and agents)."""

from __future__ import annotations

from .views import FAQ_HEADING, MachineView


def render_markdown(view: MachineView) -> str:
    lines = [f"# {view.title}", "", view.synopsis, ""]

    meta = []
    if view.author:
        meta.append(f"Author: {view.author}")
    if view.published:
        meta.append(f"Published: {view.published}")
    if view.updated:
        meta.append(f"Updated: {view.updated}")
    if meta:
        lines.extend(meta)
        lines.append("")

    if view.key_facts or view.highlights:
        lines.append("## Key Facts")
        lines.append("")
        lines.extend(f"- {fact}" for fact in (*view.key_facts, *view.highlights))
        lines.append("")

    for section in view.sections:
        lines.append(f"## {section.title}")
        lines.append("")
        if section.summary:
            lines.append(section.summary)
            lines.append("")
        if section.items:
            for n, item in enumerate(section.items, start=1):
                lines.append(f"{n}. {item}" if section.ordered else f"- {item}")
            lines.append("")

    if view.faqs:
        lines.append(f"## {FAQ_HEADING}")
        lines.append("")
        for faq in view.faqs:
            lines.append(f"### {faq.question}")
            lines.append("")
            lines.append(faq.answer)
            lines.append("")

    if view.links:
        lines.append("## Related")
        lines.append("")
        for link in view.links:
            suffix = f" - {link.description}" if link.description else ""
            lines.append(f"- [{link.label}]({link.href}){suffix}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"
