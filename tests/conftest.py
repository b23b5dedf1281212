"""Pytest configuration and fixtures."""

from datetime import date
from pathlib import Path

import pytest

from mdtrack.core.dates import DayCalendar
from mdtrack.core.types import Document


@pytest.fixture
def calendar() -> DayCalendar:
    """Provide the default YYYY-MM-DD calendar."""
    return DayCalendar()


@pytest.fixture
def make_document():
    """Factory for in-memory documents dated in January 2024."""

    def _make(
        day: int = 1,
        content: str = "",
        frontmatter: dict | None = None,
        tags: list[str] | None = None,
        links: list[str] | None = None,
        path: str | None = None,
    ) -> Document:
        return Document(
            path=path or f"2024-01-{day:02d}.md",
            date=date(2024, 1, day),
            content=content,
            frontmatter=frontmatter or {},
            tags=tags or [],
            links=links or [],
        )

    return _make


@pytest.fixture
def journal_dir(tmp_path: Path) -> Path:
    """Provide a small journal of dated notes.

    Layout:
        2024-01-01.md   #exercise, weight 72.5, [[Gym]]
        2024-01-02.md   #exercise:30 twice-mentioned [[Gym]], bp 120/80
        2024-01-04.md   frontmatter tag exercise/run, weight 71.9
        notes/2024-01-03.md   nested note, ran 5 km
        README.md       undated
        templates/2024-01-09.md   excluded by tests that pass "!templates/**"
    """
    journal = tmp_path / "journal"
    journal.mkdir()
    (journal / "2024-01-01.md").write_text(
        "---\nweight: 72.5\n---\n# Monday\n\nLeg day #exercise at [[Gym]].\n"
    )
    (journal / "2024-01-02.md").write_text(
        "---\nweight: 72.1\nbp: 120/80\n---\n"
        "Rowing #exercise:30\n\nBack to [[Gym]] and [[Gym|the gym]] later.\n"
    )
    (journal / "2024-01-04.md").write_text(
        "---\nweight: 71.9\ntags: [exercise/run]\n---\nEasy jog.\n"
    )
    notes = journal / "notes"
    notes.mkdir()
    (notes / "2024-01-03.md").write_text("Ran 5 km before work.\n")
    (journal / "README.md").write_text("# Journal\n#exercise everywhere\n")
    templates = journal / "templates"
    templates.mkdir()
    (templates / "2024-01-09.md").write_text("#exercise\n")
    return journal
