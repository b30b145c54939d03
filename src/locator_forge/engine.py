"""Locator engine: the single entry point for locator generation."""

import logging
from typing import Literal

import soupsieve

from .analyzer.html_parser import HTMLParser
from .config import LocatorForgeConfig
from .errors import NoViableLocator
from .i18n import describe_simple, describe_strategy, resolve_locale
from .models import Locale, LocatorCandidate, LocatorKind, ResultSet, TargetElement
from .ranking import rank_candidates
from .strategies import STRATEGIES
from .validator import XPathValidator

logger = logging.getLogger(__name__)

SimpleKind = Literal["byId", "byClass", "id", "class"]

SIMPLE_KINDS: dict[str, LocatorKind] = {
    "byId": LocatorKind.ID,
    "id": LocatorKind.ID,
    "byClass": LocatorKind.CLASS,
    "class": LocatorKind.CLASS,
}

ID_SCORE = 1.0
CLASS_SCORE = 0.8
MULTI_CLASS_SCORE = 0.9


class LocatorEngine:
    """Generate, validate and rank locators for one HTML element."""

    def __init__(self, config: LocatorForgeConfig | None = None):
        self.config = config or LocatorForgeConfig()

    def parse(self, fragment: str | None) -> HTMLParser:
        """Sanitize and parse a fragment; raises before any strategy runs."""
        return HTMLParser(
            fragment,
            sanitizer=self.config.sanitizer,
            target_marker=self.config.generation.target_marker,
        )

    def generate_xpath_locators(
        self,
        fragment: str | None,
        locale: str | None = None,
        *,
        strict: bool = False,
    ) -> ResultSet:
        """
        Run every strategy, keep the candidates that resolve, and rank them.

        Args:
            fragment: HTML markup holding the element to locate
            locale: Language for descriptions (en, pt)
            strict: Raise NoViableLocator instead of returning an empty set

        Returns:
            ResultSet ordered by descending reliability
        """
        document = self.parse(fragment)
        target = document.target()
        language = resolve_locale(locale, self.config.generation.default_locale)

        candidates = self.derive_candidates(target, language)
        validator = XPathValidator(
            document.markup,
            mode=self.config.validation.mode,
            reuse_tree=self.config.validation.reuse_tree,
        )

        verdicts: dict[str, bool] = {}
        validated = []
        for candidate in candidates:
            if candidate.locator not in verdicts:
                verdicts[candidate.locator] = validator.is_valid(candidate.locator)
            if verdicts[candidate.locator]:
                validated.append(candidate)

        results = rank_candidates(validated)
        logger.debug(
            "<%s>: %d candidates, %d rejected, %d ranked",
            target.tag,
            len(candidates),
            len(validator.rejected),
            len(results),
        )

        if strict and not results:
            raise NoViableLocator(target.tag)
        return results

    def derive_candidates(self, target: TargetElement, locale: Locale) -> list[LocatorCandidate]:
        """Collect raw XPath candidates from all strategies, in registry order."""
        candidates: list[LocatorCandidate] = []
        for strategy, derive in STRATEGIES.items():
            derivations = derive(target, self.config.generation)
            logger.debug("%s strategy produced %d candidates", strategy.value, len(derivations))
            description = describe_strategy(strategy, locale)
            candidates.extend(
                LocatorCandidate(
                    locator=derivation.locator,
                    kind=LocatorKind.XPATH,
                    strategy=strategy,
                    description=description,
                    reliability=derivation.reliability,
                    rule=derivation.rule,
                )
                for derivation in derivations
            )
        return candidates

    def generate_simple_locators(
        self,
        fragment: str | None,
        kind: SimpleKind,
        locale: str | None = None,
    ) -> ResultSet:
        """Build CSS selectors from the element's id or classes.

        The selectors come straight from attributes that are present, so they
        are not run through the validator.
        """
        locator_kind = SIMPLE_KINDS.get(kind)
        if locator_kind is None:
            raise ValueError(f"Unknown simple locator kind: {kind!r}")

        target = self.parse(fragment).target()
        language = resolve_locale(locale, self.config.generation.default_locale)
        candidates: list[LocatorCandidate] = []

        if locator_kind is LocatorKind.ID:
            if target.id:
                candidates.append(
                    LocatorCandidate(
                        locator=f"#{soupsieve.escape(target.id)}",
                        kind=locator_kind,
                        strategy=None,
                        description=describe_simple(locator_kind, language),
                        reliability=ID_SCORE,
                        rule="css:id",
                    )
                )
        else:
            classes = [soupsieve.escape(name) for name in target.classes]
            for name in classes:
                candidates.append(
                    LocatorCandidate(
                        locator=f".{name}",
                        kind=locator_kind,
                        strategy=None,
                        description=describe_simple(locator_kind, language),
                        reliability=CLASS_SCORE,
                        rule="css:class",
                    )
                )
            if len(classes) > 1:
                candidates.append(
                    LocatorCandidate(
                        locator="." + ".".join(classes),
                        kind=locator_kind,
                        strategy=None,
                        description=describe_simple(locator_kind, language, multiple=True),
                        reliability=MULTI_CLASS_SCORE,
                        rule="css:classes",
                    )
                )

        return rank_candidates(candidates)


def generate_xpath_locators(
    fragment: str | None, locale: str | None = None, *, strict: bool = False
) -> ResultSet:
    """Generate ranked XPath locators with the default configuration."""
    return LocatorEngine().generate_xpath_locators(fragment, locale, strict=strict)


def generate_simple_locators(
    fragment: str | None, kind: SimpleKind, locale: str | None = None
) -> ResultSet:
    """Generate id or class CSS selectors with the default configuration."""
    return LocatorEngine().generate_simple_locators(fragment, kind, locale)
