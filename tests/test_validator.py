"""Tests for locator validation."""

import pytest

from locator_forge.analyzer.sanitizer import parse_fragment
from locator_forge.validator import XPathValidator, count_xpath_matches, parse_tree, validate_css, validate_xpath


@pytest.fixture
def markup() -> str:
    return str(parse_fragment('<ul id="menu"><li class="item">One</li><li class="item">Two</li></ul>'))


class TestValidateXPath:
    def test_resolving_expression(self, markup):
        assert validate_xpath("//ul[@id='menu']", markup)

    def test_no_match(self, markup):
        assert not validate_xpath("//ol", markup)

    @pytest.mark.parametrize(
        "locator",
        ["//li[", "//*[@id='menu'", "///", "//li[@x:y='1']", "//li[unknown-fn()]"],
    )
    def test_malformed_expressions_are_invalid_not_errors(self, markup, locator):
        assert validate_xpath(locator, markup) is False

    @pytest.mark.parametrize("locator", ["count(//li)", "string(//li)", "boolean(//li)", "//li/@class"])
    def test_non_element_results_are_invalid(self, markup, locator):
        assert not validate_xpath(locator, markup)

    def test_unique_mode(self, markup):
        assert validate_xpath("//li", markup, mode="any")
        assert not validate_xpath("//li", markup, mode="unique")
        assert validate_xpath("//li[2]", markup, mode="unique")


class TestXPathValidator:
    def test_records_rejections(self, markup):
        validator = XPathValidator(markup)
        assert validator.is_valid("//li")
        assert not validator.is_valid("//li[")
        assert not validator.is_valid("//table")
        assert validator.rejected == ["//li[", "//table"]

    def test_reused_tree_gives_same_verdicts(self, markup):
        fresh = XPathValidator(markup)
        cached = XPathValidator(markup, reuse_tree=True)
        for locator in ["//li", "//li[3]", "//ul/li[@class='item']", "//li["]:
            assert fresh.is_valid(locator) == cached.is_valid(locator)

    def test_count_matches(self, markup):
        assert count_xpath_matches("//li", parse_tree(markup)) == 2


class TestValidateCss:
    def test_resolving_selector(self, markup):
        assert validate_css("#menu > li.item", markup)

    def test_syntax_error_is_invalid(self, markup):
        assert not validate_css("li[", markup)

    def test_unique_mode(self, markup):
        assert not validate_css(".item", markup, mode="unique")
        assert validate_css("#menu", markup, mode="unique")
