"""Core data models for Locator Forge."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Literal, NamedTuple

Locale = Literal["en", "pt"]


class Strategy(Enum):
    """Derivation strategies for XPath locators."""

    ATTRIBUTE = "attribute"
    TEXT_BASED = "text-based"
    CONTAINS = "contains"
    AXES = "axes"
    LOGICAL = "logical"
    COMBINED = "combined"


class LocatorKind(Enum):
    """Output family of a locator."""

    XPATH = "xpath"
    ID = "id"
    CLASS = "class"


@dataclass(frozen=True)
class ElementNode:
    """Read-only snapshot of an element in the parsed fragment."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""
    parent: "ElementNode | None" = field(default=None, repr=False, compare=False)
    # Direct child text nodes, unstripped, as XPath text() sees them
    direct_texts: tuple[str, ...] = field(default=(), repr=False, compare=False)

    @property
    def id(self) -> str | None:
        """Get the id attribute if present and non-empty."""
        return self.attributes.get("id") or None

    @property
    def classes(self) -> list[str]:
        """Class tokens in source order, without duplicates."""
        seen: list[str] = []
        for token in self.attributes.get("class", "").split():
            if token not in seen:
                seen.append(token)
        return seen

    def get(self, name: str) -> str | None:
        """Look up an attribute value by name."""
        return self.attributes.get(name)

    def ancestors(self) -> Iterator["ElementNode"]:
        """Walk upward from the parent to the fragment top level."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


@dataclass(frozen=True)
class TargetElement(ElementNode):
    """The single element under analysis."""

    siblings: tuple[ElementNode, ...] = field(default=(), repr=False, compare=False)
    position: int = 1
    previous_tag: str | None = None
    next_tag: str | None = None


class Derivation(NamedTuple):
    """Raw output of a strategy: expression, rule tag and base reliability."""

    locator: str
    rule: str
    reliability: float


@dataclass(frozen=True)
class LocatorCandidate:
    """A generated locator with its origin and reliability score."""

    locator: str
    kind: LocatorKind
    strategy: Strategy | None
    description: str
    reliability: float  # 0.0 - 1.0
    rule: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.reliability <= 1.0:
            raise ValueError(f"reliability out of range: {self.reliability}")


@dataclass(frozen=True)
class ValidatedResult(LocatorCandidate):
    """A candidate that passed validation, as returned to callers."""

    @classmethod
    def from_candidate(cls, candidate: LocatorCandidate) -> "ValidatedResult":
        return cls(
            locator=candidate.locator,
            kind=candidate.kind,
            strategy=candidate.strategy,
            description=candidate.description,
            reliability=candidate.reliability,
            rule=candidate.rule,
        )

    @property
    def tag(self) -> str:
        """Strategy tag for XPath results, locator kind for simple ones."""
        return self.strategy.value if self.strategy else self.kind.value

    def to_dict(self) -> dict:
        return {
            "locator": self.locator,
            "strategy": self.tag,
            "description": self.description,
            "reliability": self.reliability,
        }


@dataclass(frozen=True)
class ResultSet:
    """Ordered, deduplicated locators, best first."""

    results: tuple[ValidatedResult, ...] = ()

    def __iter__(self) -> Iterator[ValidatedResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> ValidatedResult:
        return self.results[index]

    def __bool__(self) -> bool:
        return bool(self.results)

    def locators(self) -> list[str]:
        """Locator strings in ranked order."""
        return [result.locator for result in self.results]

    def by_strategy(self, strategy: Strategy) -> list[ValidatedResult]:
        """Results produced by one strategy, in ranked order."""
        return [result for result in self.results if result.strategy is strategy]

    def to_dicts(self) -> list[dict]:
        return [result.to_dict() for result in self.results]
