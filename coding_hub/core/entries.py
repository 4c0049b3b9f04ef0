from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Difficulty(str, Enum):
    """
    Closed set of tutorial difficulty levels.

    Members subclass str, so Difficulty.ADVANCED == "Advanced" holds and the
    values can be stored in a dcc.Store without a custom encoder.
    """
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    def __str__(self) -> str:
        return self.value


DIFFICULTY_LEVELS: Tuple[Difficulty, ...] = (
    Difficulty.BEGINNER,
    Difficulty.INTERMEDIATE,
    Difficulty.ADVANCED,
)


@dataclass(frozen=True)
class LanguageEntry:
    """
    A programming language shown on the languages page.

    Fields:

    - name: display name, unique within the languages catalog
    - description: one-line summary
    - category: free-form label, e.g. "Web Development"
    - popularity: enum-like label, e.g. "Very High", "Growing"
    - syntax_sample: multi-line code snippet rendered in a <pre> block
    """
    name: str
    description: str
    category: str
    popularity: str
    syntax_sample: str


@dataclass(frozen=True)
class TutorialEntry:
    title: str
    description: str
    difficulty: Difficulty
    duration: str
    category: str
    link: str


@dataclass(frozen=True)
class ToolEntry:
    name: str
    description: str
    category: str
    link: str


@dataclass(frozen=True)
class CommunityEntry:
    name: str
    description: str
    # Free-form, e.g. "50M+"
    member_count: str
    link: str
