"""Fact parity between the human and machine views of one record."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ParityMismatch
from .facts import extract_claims, normalize_space, split_sentences
from .views import HumanView, MachineView


@dataclass(frozen=True, slots=True)
class ParityIssue:
    kind: str
    detail: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.detail}"


def _check_sections(human: HumanView, machine: MachineView) -> list[ParityIssue]:
    issues: list[ParityIssue] = []
    human_titles = [s.title for s in human.sections]
    machine_titles = [s.title for s in machine.sections]
    if human_titles != machine_titles:
        issues.append(ParityIssue(
            "sections", f"section titles differ: {human_titles} != {machine_titles}"
        ))
        return issues

    for h, m in zip(human.sections, machine.sections):
        n = len(h.items)
        if tuple(m.items[:n]) != tuple(h.items):
            issues.append(ParityIssue(
                "section-items", f"'{h.title}' items are not the page's items in order"
            ))
        body = split_sentences(h.body)
        body_sentences = set(body)
        for extra in m.items[n:]:
            if extra not in body_sentences:
                issues.append(ParityIssue(
                    "section-items", f"'{h.title}' item not found on the page: {extra!r}"
                ))
        if m.summary and m.summary not in body_sentences:
            issues.append(ParityIssue(
                "section-summary", f"'{h.title}' summary not found on the page: {m.summary!r}"
            ))
        covered = {m.summary, *m.items[n:]}
        for sentence in body:
            if sentence not in covered:
                issues.append(ParityIssue(
                    "dropped-sentence", f"'{h.title}' sentence missing: {sentence!r}"
                ))
    return issues


def _check_faqs(human: HumanView, machine: MachineView) -> list[ParityIssue]:
    if len(human.faqs) != len(machine.faqs):
        return [ParityIssue(
            "faqs", f"page has {len(human.faqs)} FAQs, machine view has {len(machine.faqs)}"
        )]
    for index, (h, m) in enumerate(zip(human.faqs, machine.faqs)):
        if h != m:
            return [ParityIssue("faqs", f"FAQ {index} differs: {h.question!r} != {m.question!r}")]
    return []


def check_parity(human: HumanView, machine: MachineView) -> list[ParityIssue]:
    """
    Compare the two views of a record and list every mismatch.

    The machine view may reorganise the page but may not drop or add a
    fact. Facts are the title, the publish date, the key facts, FAQs,
    section lists, every sentence of prose, and every numeric claim in the
    text (counted, so a repeated figure must be repeated). Synopsis and
    highlight sentences must appear verbatim on the page.
    """
    issues: list[ParityIssue] = []

    if human.record_id != machine.record_id:
        issues.append(ParityIssue(
            "record", f"views belong to different records: {human.record_id} != {machine.record_id}"
        ))
    if human.title != machine.title:
        issues.append(ParityIssue("title", f"{human.title!r} != {machine.title!r}"))
    if human.published != machine.published:
        issues.append(ParityIssue(
            "published", f"{human.published!r} != {machine.published!r}"
        ))
    if tuple(human.key_facts) != tuple(machine.key_facts):
        issues.append(ParityIssue("key-facts", "key facts differ"))

    description = normalize_space(human.description)
    if machine.synopsis and normalize_space(machine.synopsis) not in description:
        issues.append(ParityIssue("synopsis", "synopsis is not taken from the page description"))

    sentences = split_sentences(human.description)
    for highlight in machine.highlights:
        if highlight not in sentences:
            issues.append(ParityIssue("highlights", f"not found on the page: {highlight!r}"))
    covered = {*split_sentences(machine.synopsis), *machine.highlights}
    for sentence in sentences:
        if sentence not in covered:
            issues.append(ParityIssue("dropped-sentence", f"description sentence missing: {sentence!r}"))

    issues.extend(_check_faqs(human, machine))
    issues.extend(_check_sections(human, machine))

    human_claims = extract_claims(human.text())
    machine_claims = extract_claims(machine.text())
    for claim in sorted(human_claims - machine_claims):
        issues.append(ParityIssue("missing-claim", claim))
    for claim in sorted(machine_claims - human_claims):
        issues.append(ParityIssue("introduced-claim", claim))

    return issues


def assert_parity(human: HumanView, machine: MachineView) -> None:
    """Raise ParityMismatch when the views disagree on any fact."""
    issues = check_parity(human, machine)
    if issues:
        raise ParityMismatch(machine.record_id, issues)
