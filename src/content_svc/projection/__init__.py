"""Dual view projection - human page structure and the fact-equivalent machine view."""

from .facts import extract_claims, split_sentences
from .human import render_human
from .markdown import render_markdown
from .parity import ParityIssue, assert_parity, check_parity
from .projector import project, related_links
from .views import (
    FAQ_HEADING,
    Byline,
    HumanSection,
    HumanView,
    MachineLink,
    MachineSection,
    MachineView,
)

__all__ = [
    "FAQ_HEADING",
    "Byline",
    "HumanSection",
    "HumanView",
    "MachineLink",
    "MachineSection",
    "MachineView",
    "ParityIssue",
    "assert_parity",
    "check_parity",
    "extract_claims",
    "project",
    "related_links",
    "render_human",
    "render_markdown",
    "split_sentences",
]
