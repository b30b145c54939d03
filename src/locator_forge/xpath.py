"""Building blocks for XPath 1.0 expressions."""

import re

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijklmnopqrstuvwxyz"

_ASCII_FOLD = str.maketrans(UPPER, LOWER)
_XML_SPACE = re.compile(r"[ \t\r\n]+")
_NAME = re.compile(r"[A-Za-z_][\w.-]*")


def literal(value: str) -> str:
    """Quote a string for XPath.

    XPath 1.0 has no escape sequences: a value holding a single quote is
    wrapped in double quotes, and one holding both is rebuilt with concat().
    Example: It's "on" -> concat('It', "'", 's "on"')
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


def fold_case(value: str) -> str:
    """Lower-case ASCII letters only, mirroring translate()."""
    return value.translate(_ASCII_FOLD)


def lower(expression: str) -> str:
    """Wrap an expression in an ASCII upper-to-lower translate() call."""
    return f"translate({expression}, '{UPPER}', '{LOWER}')"


def is_xpath_name(name: str) -> bool:
    """Whether an attribute name can appear unprefixed after @."""
    return bool(_NAME.fullmatch(name))


def attr_equals(name: str, value: str) -> str:
    return f"@{name}={literal(value)}"


def has_class(name: str) -> str:
    """Whole-token class membership test."""
    return f"contains(concat(' ', normalize-space(@class), ' '), {literal(' ' + name + ' ')})"


def contains_class(value: str) -> str:
    """Substring test on the raw class attribute."""
    return f"contains(@class, {literal(value)})"


def contains(expression: str, value: str) -> str:
    return f"contains({expression}, {literal(value)})"


def contains_ignore_case(expression: str, value: str) -> str:
    return f"contains({lower(expression)}, {literal(fold_case(value))})"


def starts_with(expression: str, value: str) -> str:
    return f"starts-with({expression}, {literal(value)})"


def ends_with(expression: str, value: str) -> str:
    """Suffix test; XPath 1.0 has no ends-with(), so slice the tail."""
    quoted = literal(value)
    return (
        f"substring({expression}, string-length({expression}) - string-length({quoted}) + 1)"
        f" = {quoted}"
    )


def text_equals(value: str) -> str:
    return f"text()={literal(value)}"


def normalized_text_equals(value: str) -> str:
    return f"normalize-space()={literal(normalize_space(value))}"


def normalize_space(value: str) -> str:
    """Collapse whitespace the way XPath normalize-space() does."""
    return " ".join(part for part in _XML_SPACE.split(value) if part)


def predicate_path(tag: str, *predicates: str, position: int | None = None) -> str:
    """Build //tag[p1][p2]...[n]."""
    steps = "".join(f"[{predicate}]" for predicate in predicates)
    if position is not None:
        steps += f"[{position}]"
    return f"//{tag}{steps}"


def join(operator: str, predicates: list[str]) -> str:
    return f" {operator} ".join(predicates)
