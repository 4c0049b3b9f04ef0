from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .entries import (
    CommunityEntry,
    Difficulty,
    LanguageEntry,
    ToolEntry,
    TutorialEntry,
)
from .exceptions import CatalogError

logger = logging.getLogger(__name__)


class Domain(str, Enum):
    LANGUAGES = "languages"
    TUTORIALS = "tutorials"
    TOOLS = "tools"
    COMMUNITIES = "communities"


CatalogCollection = Union[
    Tuple[LanguageEntry, ...],
    Tuple[TutorialEntry, ...],
    Tuple[ToolEntry, ...],
    Tuple[CommunityEntry, ...],
]


@dataclass(frozen=True)
class CatalogStore:
    """
    Read-only, ordered collections for the four content domains.

    Design Notes:
    - Collections are tuples so neither the store nor the filter engine can mutate them
    - Order is the display order; filtering only ever drops entries, never reorders
    - Enforces invariants at construction:
        * every entry has the type of its domain
        * language names are unique within the languages catalog
    """

    languages: Tuple[LanguageEntry, ...] = ()
    tutorials: Tuple[TutorialEntry, ...] = ()
    tools: Tuple[ToolEntry, ...] = ()
    communities: Tuple[CommunityEntry, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable from callers, but always hold tuples
        for attr in ("languages", "tutorials", "tools", "communities"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

        self._check_types(self.languages, LanguageEntry, Domain.LANGUAGES)
        self._check_types(self.tutorials, TutorialEntry, Domain.TUTORIALS)
        self._check_types(self.tools, ToolEntry, Domain.TOOLS)
        self._check_types(self.communities, CommunityEntry, Domain.COMMUNITIES)

        seen: set[str] = set()
        for entry in self.languages:
            if entry.name in seen:
                raise CatalogError(f"Language '{entry.name}' appears more than once")
            seen.add(entry.name)

    @staticmethod
    def _check_types(entries: tuple, expected: type, domain: Domain) -> None:
        for entry in entries:
            if not isinstance(entry, expected):
                raise CatalogError(
                    f"{domain.value} catalog expects {expected.__name__}, "
                    f"got {type(entry).__name__}"
                )

    def collection(self, domain: Domain | str) -> CatalogCollection:
        """
        Return the full collection for a domain.

        :param domain: a Domain member or its string value
        :return: the ordered, immutable collection

        Raises:
            KeyError: if domain is not one of the four content domains
        """
        try:
            domain = Domain(domain)
        except ValueError:
            raise KeyError(f"Catalog domain '{domain}' not found")
        return getattr(self, domain.value)


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------

LANGUAGES: Tuple[LanguageEntry, ...] = (
    LanguageEntry(
        name="JavaScript",
        description="The language of the web. Used for frontend, backend, and mobile development.",
        category="Web Development",
        popularity="Very High",
        syntax_sample="function greet(name) {\n  return `Hello, ${name}!`;\n}",
    ),
    LanguageEntry(
        name="Python",
        description="Versatile language perfect for beginners, data science, and automation.",
        category="General Purpose",
        popularity="Very High",
        syntax_sample="def greet(name):\n    return f'Hello, {name}!'",
    ),
    LanguageEntry(
        name="TypeScript",
        description="JavaScript with static type definitions for better development experience.",
        category="Web Development",
        popularity="High",
        syntax_sample="function greet(name: string): string {\n  return `Hello, ${name}!`;\n}",
    ),
    LanguageEntry(
        name="Rust",
        description="Systems programming language focused on safety, speed, and concurrency.",
        category="Systems Programming",
        popularity="Growing",
        syntax_sample='fn greet(name: &str) -> String {\n    format!("Hello, {}!", name)\n}',
    ),
    LanguageEntry(
        name="Go",
        description="Simple, reliable, and efficient language designed by Google.",
        category="Backend Development",
        popularity="High",
        syntax_sample='func greet(name string) string {\n    return fmt.Sprintf("Hello, %s!", name)\n}',
    ),
    LanguageEntry(
        name="Java",
        description="Enterprise-grade language known for its portability and robustness.",
        category="Enterprise Development",
        popularity="Very High",
        syntax_sample='public String greet(String name) {\n    return "Hello, " + name + "!";\n}',
    ),
)

TUTORIALS: Tuple[TutorialEntry, ...] = (
    TutorialEntry(
        title="JavaScript Fundamentals",
        description="Learn the basics of JavaScript including variables, functions, and control structures.",
        difficulty=Difficulty.BEGINNER,
        duration="2 hours",
        category="Web Development",
        link="/tutorials/javascript-fundamentals.html",
    ),
    TutorialEntry(
        title="React Hooks Deep Dive",
        description="Master React hooks including useState, useEffect, and custom hooks.",
        difficulty=Difficulty.INTERMEDIATE,
        duration="3 hours",
        category="React",
        link="/tutorials/react-hooks-deep-dive.html",
    ),
    TutorialEntry(
        title="Python Data Science",
        description="Introduction to data analysis and visualization with Python.",
        difficulty=Difficulty.BEGINNER,
        duration="4 hours",
        category="Data Science",
        link="/tutorials/python-data-science.html",
    ),
    TutorialEntry(
        title="Advanced TypeScript Patterns",
        description="Learn advanced TypeScript features like conditional types and mapped types.",
        difficulty=Difficulty.ADVANCED,
        duration="5 hours",
        category="TypeScript",
        link="/tutorials/advanced-typescript-patterns.html",
    ),
    TutorialEntry(
        title="Node.js API Development",
        description="Build RESTful APIs with Node.js and Express.",
        difficulty=Difficulty.INTERMEDIATE,
        duration="6 hours",
        category="Backend",
        link="/tutorials/nodejs-api-development.html",
    ),
    TutorialEntry(
        title="CSS Grid and Flexbox",
        description="Master modern CSS layout techniques.",
        difficulty=Difficulty.BEGINNER,
        duration="2.5 hours",
        category="CSS",
        link="/tutorials/css-grid-flexbox.html",
    ),
)

TOOLS: Tuple[ToolEntry, ...] = (
    ToolEntry(
        name="Visual Studio Code",
        description="Free, powerful code editor with extensive extensions and built-in Git support.",
        category="Editors",
        link="https://code.visualstudio.com",
    ),
    ToolEntry(
        name="GitHub",
        description="Version control and collaboration platform for software development.",
        category="Version Control",
        link="https://github.com",
    ),
    ToolEntry(
        name="Figma",
        description="Collaborative interface design tool for creating user interfaces and prototypes.",
        category="Design",
        link="https://figma.com",
    ),
    ToolEntry(
        name="Postman",
        description="API development environment for testing and debugging APIs.",
        category="API Testing",
        link="https://postman.com",
    ),
    ToolEntry(
        name="Docker",
        description="Platform for developing, shipping, and running applications in containers.",
        category="DevOps",
        link="https://docker.com",
    ),
    ToolEntry(
        name="npm",
        description="Package manager for JavaScript and the world's largest software registry.",
        category="Package Managers",
        link="https://npmjs.com",
    ),
)

COMMUNITIES: Tuple[CommunityEntry, ...] = (
    CommunityEntry(
        name="Stack Overflow",
        description="The largest online community for programmers to learn and share knowledge.",
        member_count="50M+",
        link="https://stackoverflow.com",
    ),
    CommunityEntry(
        name="GitHub Community",
        description="Connect with developers worldwide and contribute to open source projects.",
        member_count="100M+",
        link="https://github.com/community",
    ),
    CommunityEntry(
        name="Dev.to",
        description="Community of software developers getting together to help one another out.",
        member_count="1M+",
        link="https://dev.to",
    ),
    CommunityEntry(
        name="Reddit Programming",
        description="Active subreddit for programming discussions and career advice.",
        member_count="4M+",
        link="https://reddit.com/r/programming",
    ),
    CommunityEntry(
        name="Discord Programming",
        description="Real-time chat communities for programmers and developers.",
        member_count="500K+",
        link="https://discord.gg/programming",
    ),
    CommunityEntry(
        name="freeCodeCamp",
        description="Learn to code with free online courses and join a supportive community.",
        member_count="400K+",
        link="https://freecodecamp.org",
    ),
)


def default_catalog() -> CatalogStore:
    """Build the store holding the compiled-in reference data."""
    store = CatalogStore(
        languages=LANGUAGES,
        tutorials=TUTORIALS,
        tools=TOOLS,
        communities=COMMUNITIES,
    )
    logger.debug(
        "Catalog store built",
        extra={domain.value: len(store.collection(domain)) for domain in Domain},
    )
    return store
