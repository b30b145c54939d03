"""Human-readable locator descriptions in the supported locales."""

import logging

from .models import Locale, LocatorKind, Strategy

logger = logging.getLogger(__name__)

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "pt")

STRATEGY_DESCRIPTIONS: dict[str, dict[Strategy, str]] = {
    "en": {
        Strategy.ATTRIBUTE: "Uses element attributes for precise location",
        Strategy.TEXT_BASED: "Locates element by its text content",
        Strategy.CONTAINS: "Uses partial matching for flexible selection",
        Strategy.AXES: "Navigates through document relationships",
        Strategy.LOGICAL: "Combines conditions with AND/OR operators",
        Strategy.COMBINED: "Uses multiple strategies for robust selection",
    },
    "pt": {
        Strategy.ATTRIBUTE: "Usa atributos do elemento para localização precisa",
        Strategy.TEXT_BASED: "Localiza o elemento pelo seu conteúdo de texto",
        Strategy.CONTAINS: "Usa correspondência parcial para seleção flexível",
        Strategy.AXES: "Navega através das relações do documento",
        Strategy.LOGICAL: "Combina condições com operadores E/OU",
        Strategy.COMBINED: "Usa múltiplas estratégias para seleção robusta",
    },
}

STRATEGY_LABELS: dict[str, dict[Strategy, str]] = {
    "en": {
        Strategy.ATTRIBUTE: "Attribute-based",
        Strategy.TEXT_BASED: "Text-based",
        Strategy.CONTAINS: "Contains",
        Strategy.AXES: "Axes-based",
        Strategy.LOGICAL: "Logical operators",
        Strategy.COMBINED: "Combined",
    },
    "pt": {
        Strategy.ATTRIBUTE: "Baseado em atributos",
        Strategy.TEXT_BASED: "Baseado em texto",
        Strategy.CONTAINS: "Contém",
        Strategy.AXES: "Baseado em eixos",
        Strategy.LOGICAL: "Operadores lógicos",
        Strategy.COMBINED: "Combinado",
    },
}

# Simple CSS locators; "multi_class" is the conjunction of every class.
SIMPLE_DESCRIPTIONS: dict[str, dict[str, str]] = {
    "en": {
        "id": "Locates the element by its ID",
        "class": "Locates the element by its CSS class",
        "multi_class": "Locates the element by multiple classes",
    },
    "pt": {
        "id": "Localiza o elemento pelo ID",
        "class": "Localiza o elemento pela classe CSS",
        "multi_class": "Localiza o elemento por múltiplas classes",
    },
}


def resolve_locale(locale: str | None, default: Locale = "en") -> Locale:
    """Normalize a locale tag, falling back to the default when unsupported."""
    if not locale:
        return default
    normalized = locale.strip().lower().replace("_", "-").split("-")[0]
    if normalized in SUPPORTED_LOCALES:
        return normalized  # type: ignore[return-value]
    logger.warning("Unsupported locale %r, falling back to %r", locale, default)
    return default


def describe_strategy(strategy: Strategy, locale: Locale) -> str:
    return STRATEGY_DESCRIPTIONS[locale][strategy]


def strategy_label(strategy: Strategy, locale: Locale) -> str:
    return STRATEGY_LABELS[locale][strategy]


def describe_simple(kind: LocatorKind, locale: Locale, multiple: bool = False) -> str:
    key = "multi_class" if multiple else kind.value
    return SIMPLE_DESCRIPTIONS[locale][key]
