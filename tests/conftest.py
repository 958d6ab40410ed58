from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from cvflow.constants.layout import FontVariant, LayoutConfig
from cvflow.models.profile import Profile

# Fake glyph widths in mm per character.
CHAR_WIDTHS = {
    FontVariant.REGULAR: 2.0,
    FontVariant.BOLD: 2.5,
    FontVariant.ITALIC: 2.0,
}
FAKE_LINE_HEIGHT = 4.0


@dataclass
class DrawCall:
    kind: str
    page: int
    x: float
    y: float
    text: str = ""
    variant: FontVariant = FontVariant.REGULAR
    size: float = 0.0


@dataclass
class FakeCanvas:
    """Deterministic measuring page writer that records every draw call."""

    page_width: float = 210.0
    page_height: float = 297.0
    page_count: int = 1
    calls: list[DrawCall] = field(default_factory=list)
    _variant: FontVariant = FontVariant.REGULAR
    _size: float = 10.0

    # TextMetrics
    def measure_width(self, text: str, variant: FontVariant, size: float) -> float:
        return len(text) * CHAR_WIDTHS[variant]

    def wrap_to_width(
        self,
        text: str,
        width: float,
        variant: FontVariant,
        size: float,
    ) -> list[str]:
        lines: list[str] = []
        current = ""
        for word in text.split():
            candidate = f"{current} {word}" if current else word
            if current and self.measure_width(candidate, variant, size) > width:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current:
            lines.append(current)
        return lines

    def line_height(self, size: float) -> float:
        return FAKE_LINE_HEIGHT

    # PageWriter
    def add_page(self) -> None:
        self.page_count += 1

    def set_font(self, variant: FontVariant, size: float) -> None:
        self._variant = variant
        self._size = size

    def draw_text(self, x: float, y: float, text: str) -> None:
        self.calls.append(
            DrawCall("text", self.page_count, x, y, text, self._variant, self._size)
        )

    def draw_rule(self, x1: float, y1: float, x2: float, y2: float, thickness: float) -> None:
        self.calls.append(DrawCall("rule", self.page_count, x1, y1, f"{x2}"))

    def output(self, path: Path) -> Path:
        path = Path(path)
        path.write_bytes(b"%FAKE")
        return path

    # Helpers for assertions
    @property
    def texts(self) -> list[str]:
        return [c.text for c in self.calls if c.kind == "text"]

    def find(self, text: str) -> DrawCall:
        for call in self.calls:
            if call.kind == "text" and call.text == text:
                return call
        raise AssertionError(f"{text!r} was never drawn; drawn: {self.texts}")


@pytest.fixture
def canvas() -> FakeCanvas:
    return FakeCanvas()


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def full_profile() -> Profile:
    return Profile.model_validate(
        {
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "phone": "+33 6 12 34 56 78",
            "location": "Lyon",
            "linkedin": "https://linkedin.com/in/janedoe",
            "portfolio": "http://janedoe.dev",
            "bio": "Engineering student who enjoys **data** pipelines.",
            "availability": "",
            "skills": "Python, SQL\nDocker",
            "languages": "French, English",
            "interests": "",
            "experiences": [
                {
                    "id": "e1",
                    "company": "Acme",
                    "role": "Data Intern",
                    "location": "Paris",
                    "startDate": "2023-01",
                    "endDate": "",
                    "isCurrent": True,
                    "description": "Built ingestion jobs.",
                }
            ],
            "projects": [
                {
                    "id": "p1",
                    "name": "Router",
                    "description": "A tiny HTTP router.",
                    "technologies": "Go",
                }
            ],
            "education": [
                {
                    "id": "d1",
                    "school": "INSA",
                    "degree": "MSc Computer Science",
                    "startDate": "2021-09",
                    "endDate": "2026-06",
                }
            ],
            "certifications": [
                {"id": "c1", "name": "AWS Cloud Practitioner", "issuer": "AWS", "date": "2024"}
            ],
        }
    )
