"""Tests for the individual locator strategies."""

from locator_forge.models import Strategy
from locator_forge.strategies import STRATEGIES, attribute, axes, combined, contains, logical, text
from locator_forge.validator import parse_tree
from locator_forge.xpath import has_class


def locators(derivations):
    return [d.locator for d in derivations]


def rules(derivations):
    return [d.rule for d in derivations]


class TestRegistry:
    def test_emission_order(self):
        assert list(STRATEGIES) == [
            Strategy.ATTRIBUTE,
            Strategy.TEXT_BASED,
            Strategy.CONTAINS,
            Strategy.AXES,
            Strategy.LOGICAL,
            Strategy.COMBINED,
        ]


class TestAttributeStrategy:
    def test_id_first_with_highest_score(self, target, generation):
        found = attribute.derive(target('<div id="main"></div>'), generation)
        assert locators(found) == ["//*[@id='main']", "//div[@id='main']"]
        assert found[0].reliability == 0.95

    def test_single_and_all_class_predicates(self, target, generation):
        found = attribute.derive(target('<div class="a b"></div>'), generation)
        assert locators(found) == [
            f"//*[{has_class('a')}]",
            f"//*[{has_class('b')}]",
            f"//*[{has_class('a')} and {has_class('b')}]",
        ]
        assert rules(found) == ["attr:class", "attr:class", "attr:classes"]

    def test_position_variant_when_class_is_shared(self, target, generation):
        element = target(
            '<ul><li class="item">One</li><li class="item" data-locator-target>Two</li></ul>'
        )
        found = attribute.derive(element, generation)
        assert f"//li[{has_class('item')}][2]" in locators(found)

    def test_no_position_variant_for_unique_class(self, target, generation):
        element = target('<ul><li class="first">One</li><li class="item" data-locator-target>Two</li></ul>')
        found = attribute.derive(element, generation)
        assert "attr:class-position" not in rules(found)

    def test_semantic_attributes_scoped_to_tag_and_wildcard(self, target, generation):
        found = attribute.derive(
            target('<button data-testid="save" aria-label="Save" type="submit">Save</button>'),
            generation,
        )
        assert locators(found) == [
            "//button[@data-testid='save']",
            "//*[@data-testid='save']",
            "//button[@aria-label='Save']",
            "//*[@aria-label='Save']",
        ]

    def test_quotes_in_values_are_escaped(self, target, generation):
        found = attribute.derive(target("<input name=\"it's\">"), generation)
        assert "//input[@name=\"it's\"]" in locators(found)


class TestTextStrategy:
    def test_no_text_no_candidates(self, target, generation):
        assert text.derive(target('<div id="x"></div>'), generation) == []

    def test_all_text_forms(self, target, generation):
        found = text.derive(target("<span>Hello</span>"), generation)
        assert locators(found) == [
            "//span[text()='Hello']",
            "//span[contains(text(), 'Hello')]",
            "//span[normalize-space()='Hello']",
            "//span[contains(translate(., 'ABCDEFGHIJKLMNOPQRSTUVWXYZ', "
            "'abcdefghijklmnopqrstuvwxyz'), 'hello')]",
        ]
        assert all(d.reliability >= 0.85 for d in found)

    def test_normalized_form_collapses_whitespace(self, target, generation):
        found = text.derive(target("<p>Hello   big\n world</p>"), generation)
        assert "//p[normalize-space()='Hello big world']" in locators(found)

    def test_position_variant_for_repeated_text(self, target, generation):
        element = target("<div><b>Go</b><b>Stop</b><b data-locator-target>Go</b></div>")
        found = text.derive(element, generation)
        assert found[-1].locator == "//b[text()='Go'][2]"
        assert found[-1].rule == "text:exact-position"

    def test_position_counts_direct_text_nodes_only(self, parse, generation):
        document = parse('<div><b> Go </b><b title="me" data-locator-target>Go</b><b>Go</b></div>')
        found = text.derive(document.target(), generation)
        positional = [d.locator for d in found if d.rule == "text:exact-position"]
        assert positional == ["//b[text()='Go'][1]"]

        resolved = parse_tree(document.markup).xpath(positional[0])
        assert [node.get("title") for node in resolved] == ["me"]

    def test_no_position_when_text_is_nested(self, target, generation):
        element = target("<div><b><i>Go</i></b><b data-locator-target><i>Go</i></b></div>")
        assert "text:exact-position" not in rules(text.derive(element, generation))


class TestContainsStrategy:
    def test_four_forms_per_allowlisted_attribute(self, target, generation):
        found = contains.derive(target('<input placeholder="Email" type="email">'), generation)
        assert locators(found) == [
            "//*[contains(@placeholder, 'Email')]",
            "//*[contains(translate(@placeholder, 'ABCDEFGHIJKLMNOPQRSTUVWXYZ', "
            "'abcdefghijklmnopqrstuvwxyz'), 'email')]",
            "//*[starts-with(@placeholder, 'Email')]",
            "//*[substring(@placeholder, string-length(@placeholder) - string-length('Email') + 1) = 'Email']",
        ]

    def test_ignores_attributes_outside_allowlist(self, target, generation):
        assert contains.derive(target('<input type="email" value="x">'), generation) == []


class TestAxesStrategy:
    def test_no_relationships_for_lone_element(self, target, generation):
        assert axes.derive(target('<div id="main"></div>'), generation) == []

    def test_parent_and_ancestor_chain(self, target, generation):
        element = target(
            '<div id="app"><section class="panel main"><p><a href="/x" data-locator-target>Go</a></p></section></div>'
        )
        found = locators(axes.derive(element, generation))
        assert found == [
            "//p/a",
            f"//section[{has_class('panel')}]/p/a",
            "//div[@id='app']/section/p/a",
        ]

    def test_parent_id_and_class(self, target, generation):
        element = target('<form id="login" class="card"><input name="user" data-locator-target></form>')
        found = axes.derive(element, generation)
        assert locators(found)[:3] == [
            "//form/input",
            "//form[@id='login']/input",
            f"//form[{has_class('card')}]/input",
        ]

    def test_sibling_adjacency(self, target, generation):
        element = target("<ul><li>a</li><li data-locator-target>b</li><li>c</li></ul>")
        found = locators(axes.derive(element, generation))
        assert "//li[preceding-sibling::*[1][self::li]]" in found
        assert "//li[following-sibling::*[1][self::li]]" in found

    def test_ancestor_depth_is_bounded(self, target, generation):
        generation.max_ancestor_depth = 1
        element = target('<div id="app"><p class="row"><a data-locator-target>Go</a></p></div>')
        found = axes.derive(element, generation)
        assert "//div[@id='app']/p/a" not in locators(found)


class TestLogicalStrategy:
    def test_and_or_over_attributes(self, target, generation):
        found = logical.derive(target('<input id="q" name="query" type="search">'), generation)
        assert locators(found) == [
            "//input[@id='q' and @name='query']",
            "//input[@id='q' and @name='query' and @type='search']",
            "//input[@id='q' or @name='query']",
        ]

    def test_text_with_attribute(self, target, generation):
        found = logical.derive(target('<a class="nav">Home</a>'), generation)
        assert locators(found) == [
            "//a[@class='nav' and normalize-space()='Home']",
            "//a[@class='nav' or contains(text(), 'Home')]",
        ]

    def test_needs_attributes(self, target, generation):
        assert logical.derive(target("<span>Hello</span>"), generation) == []

    def test_skips_attribute_names_xpath_cannot_address(self, target, generation):
        found = logical.derive(target('<button x-on:click="go" :class="x" id="b" name="n">Go</button>'), generation)
        assert "//button[@id='b' and @name='n']" in locators(found)


class TestCombinedStrategy:
    def test_class_with_text(self, target, generation):
        found = combined.derive(target('<button class="btn primary">Pay</button>'), generation)
        assert locators(found) == [
            "//button[contains(@class, 'btn primary')][text()='Pay']",
            "//button[contains(@class, 'btn primary') and normalize-space()='Pay']",
        ]
        assert all(d.reliability == 0.95 for d in found)

    def test_id_class_with_position(self, target, generation):
        found = combined.derive(target('<div id="x" class="card"></div>'), generation)
        assert locators(found) == ["//div[@id='x'][contains(@class, 'card')][1]"]

    def test_parent_class_descendant_path(self, target, generation):
        element = target('<nav class="menu"><a class="link" data-locator-target>Go</a></nav>')
        found = combined.derive(element, generation)
        assert f"//nav[{has_class('menu')}]//a[{has_class('link')}]" in locators(found)
