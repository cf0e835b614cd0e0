"""Tests for selectors module."""

import pytest

from selectorkit import (
    BuilderOptions,
    Combinator,
    CombinedSelector,
    CompoundSelector,
    DuplicateFragmentError,
    FragmentKind,
    InvalidCombinatorError,
    OutOfOrderError,
    SelectorBuilder,
    SelectorError,
    SelectorFragment,
    SelectorSyntaxError,
    css_selector_builder,
)


@pytest.fixture
def builder():
    return SelectorBuilder()


class TestFragmentKind:
    """Tests for FragmentKind ranks and prefixes."""

    def test_ranks_follow_declaration_order(self):
        """Test ranks run from element to pseudo-element."""
        ranks = [kind.rank for kind in FragmentKind]
        assert ranks == [0, 1, 2, 3, 4, 5]
        assert FragmentKind.ELEMENT.rank < FragmentKind.PSEUDO_ELEMENT.rank

    def test_unique_kinds(self):
        """Test which kinds may occur only once."""
        unique = {kind for kind in FragmentKind if kind.unique}
        assert unique == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }

    def test_fragment_render(self):
        """Test each fragment kind's rendering."""
        assert SelectorFragment(FragmentKind.ELEMENT, "div").render() == "div"
        assert SelectorFragment(FragmentKind.ID, "main").render() == "#main"
        assert SelectorFragment(FragmentKind.CLASS, "box").render() == ".box"
        assert SelectorFragment(FragmentKind.ATTRIBUTE, "href").render() == "[href]"
        assert SelectorFragment(FragmentKind.PSEUDO_CLASS, "hover").render() == ":hover"
        assert (
            SelectorFragment(FragmentKind.PSEUDO_ELEMENT, "before").render()
            == "::before"
        )

    def test_fragment_is_frozen(self):
        """Test fragments cannot be changed after creation."""
        fragment = SelectorFragment(FragmentKind.ID, "main")
        with pytest.raises(AttributeError):
            fragment.value = "other"


class TestCompoundSelector:
    """Tests for building compound selectors."""

    def test_id_and_classes(self, builder):
        """Test id followed by repeated classes."""
        selector = builder.id("main").class_("container").class_("editable")
        assert selector.render() == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        """Test element with attribute and pseudo-class."""
        selector = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert selector.render() == 'a[href$=".png"]:focus'

    def test_full_selector(self, builder):
        """Test every fragment kind in rank order."""
        selector = (
            builder.element("input")
            .id("email")
            .class_("field")
            .attr('type="email"')
            .pseudo_class("invalid")
            .pseudo_element("placeholder")
        )
        assert selector.render() == 'input#email.field[type="email"]:invalid::placeholder'

    def test_repeatable_fragments(self, builder):
        """Test class, attribute and pseudo-class may repeat in order."""
        selector = (
            builder.element("li")
            .class_("a")
            .class_("b")
            .attr("data-x")
            .attr("data-y")
            .pseudo_class("first-child")
            .pseudo_class("hover")
        )
        assert selector.render() == "li.a.b[data-x][data-y]:first-child:hover"

    def test_chaining_returns_same_instance(self, builder):
        """Test fragment calls mutate and return the same selector."""
        selector = builder.element("div")
        assert selector.id("main") is selector
        assert selector.render() == "div#main"

    def test_builder_calls_start_independent_selectors(self, builder):
        """Test each builder call creates a new selector."""
        first = builder.element("div")
        second = builder.element("span")
        first.class_("x")
        assert first is not second
        assert second.render() == "span"

    def test_keyword_spellings(self, builder):
        """Test 'class' and camelCase aliases."""
        selector = getattr(builder, "class")("main")
        getattr(selector, "class")("wide")
        selector.pseudoClass("hover").pseudoElement("after")
        assert selector.render() == ".main.wide:hover::after"
        assert builder.pseudoClass("root").render() == ":root"
        assert builder.pseudoElement("before").render() == "::before"

    def test_stringify_and_str(self, builder):
        """Test render aliases."""
        selector = builder.element("p").class_("lead")
        assert selector.stringify() == "p.lead"
        assert str(selector) == "p.lead"
        assert repr(selector) == "CompoundSelector('p.lead')"

    def test_empty_selector_renders_empty_string(self):
        """Test a selector with no fragments."""
        assert CompoundSelector().render() == ""

    def test_fragments_in_append_order(self, builder):
        """Test fragment inspection."""
        selector = builder.element("a").class_("x")
        assert [f.kind for f in selector.fragments] == [
            FragmentKind.ELEMENT,
            FragmentKind.CLASS,
        ]
        assert len(selector) == 2
        assert selector.has(FragmentKind.CLASS)
        assert not selector.has(FragmentKind.ID)
        assert selector.highest_kind == FragmentKind.CLASS

    def test_non_string_value(self, builder):
        """Test values must be strings."""
        with pytest.raises(TypeError):
            builder.element(42)


class TestDuplicateFragments:
    """Tests for cardinality rules."""

    def test_second_element(self, builder):
        """Test a second element fails."""
        selector = builder.element("div").id("main")
        with pytest.raises(DuplicateFragmentError) as exc_info:
            selector.element("span")
        assert exc_info.value.kind == FragmentKind.ELEMENT

    def test_second_id(self, builder):
        """Test a second id fails."""
        with pytest.raises(DuplicateFragmentError) as exc_info:
            builder.id("a").id("b")
        assert exc_info.value.kind == FragmentKind.ID

    def test_second_pseudo_element(self, builder):
        """Test a second pseudo-element fails."""
        with pytest.raises(DuplicateFragmentError) as exc_info:
            builder.pseudo_element("before").pseudo_element("after")
        assert exc_info.value.kind == FragmentKind.PSEUDO_ELEMENT

    def test_duplicate_checked_before_order(self, builder):
        """Test a repeated element after an id reports the duplicate."""
        with pytest.raises(DuplicateFragmentError):
            builder.element("div").id("main").element("span")

    def test_selector_unchanged_after_failure(self, builder):
        """Test failed append leaves the selector as it was."""
        selector = builder.element("div").id("main")
        with pytest.raises(DuplicateFragmentError):
            selector.id("other")
        assert selector.render() == "div#main"
        assert len(selector) == 2

    def test_is_selector_error(self, builder):
        """Test duplicate errors share the base class."""
        with pytest.raises(SelectorError):
            builder.element("a").element("b")


class TestOutOfOrderFragments:
    """Tests for ordering rules."""

    def test_element_after_id(self, builder):
        """Test an element after an id fails."""
        with pytest.raises(OutOfOrderError) as exc_info:
            builder.id("x").element("div")
        assert exc_info.value.kind == FragmentKind.ELEMENT
        assert exc_info.value.after == FragmentKind.ID

    def test_id_after_class(self, builder):
        """Test an id after a class fails."""
        with pytest.raises(OutOfOrderError):
            builder.class_("box").id("main")

    def test_class_after_attribute(self, builder):
        """Test a class after an attribute fails."""
        with pytest.raises(OutOfOrderError):
            builder.attr("href").class_("link")

    def test_attribute_after_pseudo_class(self, builder):
        """Test an attribute after a pseudo-class fails."""
        with pytest.raises(OutOfOrderError):
            builder.pseudo_class("hover").attr("href")

    def test_pseudo_class_after_pseudo_element(self, builder):
        """Test a pseudo-class after a pseudo-element fails."""
        with pytest.raises(OutOfOrderError) as exc_info:
            builder.element("p").pseudo_element("first-line").pseudo_class("hover")
        assert exc_info.value.after == FragmentKind.PSEUDO_ELEMENT

    def test_selector_unchanged_after_failure(self, builder):
        """Test failed append leaves the selector as it was."""
        selector = builder.element("a").pseudo_class("hover")
        with pytest.raises(OutOfOrderError):
            selector.class_("late")
        assert selector.render() == "a:hover"

    def test_attribute_text_does_not_affect_order(self, builder):
        """Test punctuation inside values is never read as a fragment."""
        selector = builder.element("a").attr('href$=".png"').attr("data-x=\"a:b#c\"")
        selector.pseudo_class("focus")
        assert selector.render() == 'a[href$=".png"][data-x="a:b#c"]:focus'

    def test_value_with_prefix_characters(self, builder):
        """Test a value containing ':' still allows later classes."""
        selector = builder.element("svg:rect").id("x").class_("y")
        assert selector.render() == "svg:rect#x.y"

    def test_errors_are_distinct(self, builder):
        """Test ordering and duplicate errors are different conditions."""
        with pytest.raises(OutOfOrderError):
            builder.class_("a").element("b")
        with pytest.raises(DuplicateFragmentError):
            builder.element("a").element("b")
        assert not issubclass(OutOfOrderError, DuplicateFragmentError)
        assert not issubclass(DuplicateFragmentError, OutOfOrderError)


class TestCombine:
    """Tests for combining selectors."""

    def test_adjacent_sibling(self, builder):
        """Test '+' combination."""
        combined = builder.combine(builder.element("h1"), "+", builder.element("p"))
        assert combined.render() == "h1 + p"

    def test_child_with_enum(self, builder):
        """Test combinator enum member."""
        combined = builder.combine(
            builder.element("ul"), Combinator.CHILD, builder.element("li")
        )
        assert combined.render() == "ul > li"
        assert combined.token == ">"

    def test_descendant_has_three_spaces(self, builder):
        """Test descendant token is padded on both sides."""
        combined = builder.combine(
            builder.element("tr").pseudo_class("x"),
            " ",
            builder.element("td").pseudo_class("y"),
        )
        assert combined.render() == "tr:x   td:y"

    def test_nested_combine(self, builder):
        """Test a combination used as an operand."""
        x = builder.element("h2")
        y = builder.element("p")
        z = builder.element("em")
        combined = builder.combine(x, "~", builder.combine(y, " ", z))
        assert combined.render() == "h2 ~ p   em"

    def test_reference_example(self):
        """Test deeply nested combination."""
        builder = css_selector_builder
        combined = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert combined.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_custom_token(self, builder):
        """Test any token string is accepted by default."""
        combined = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert combined.render() == "a || b"

    def test_combine_results_are_independent(self, builder):
        """Test successive combine calls do not overwrite each other."""
        first = builder.combine(builder.element("a"), ">", builder.element("b"))
        second = builder.combine(builder.element("c"), "+", builder.element("d"))
        assert isinstance(first, CombinedSelector)
        assert first is not second
        assert first.render() == "a > b"
        assert second.render() == "c + d"

    def test_operands_not_mutated(self, builder):
        """Test combination keeps the text captured at creation."""
        left = builder.element("div")
        right = builder.element("span")
        combined = builder.combine(left, ">", right)
        left.class_("late")
        assert combined.render() == "div > span"
        assert left.render() == "div.late"
        assert combined.left is left
        assert combined.right is right

    def test_non_selector_operand(self, builder):
        """Test operands must be selectors."""
        with pytest.raises(TypeError):
            builder.combine("div", ">", builder.element("span"))

    def test_non_string_token(self, builder):
        """Test token must be a string."""
        with pytest.raises(TypeError):
            builder.combine(builder.element("a"), 1, builder.element("b"))


class TestStrictCombinators:
    """Tests for strict combinator mode."""

    def test_standard_tokens_accepted(self):
        """Test the four standard combinators pass."""
        builder = SelectorBuilder(BuilderOptions(strict_combinators=True))
        for token in (" ", ">", "+", "~"):
            combined = builder.combine(builder.element("a"), token, builder.element("b"))
            assert combined.token == token

    def test_unknown_token_rejected(self):
        """Test other tokens raise InvalidCombinatorError."""
        builder = SelectorBuilder(BuilderOptions(strict_combinators=True))
        with pytest.raises(InvalidCombinatorError) as exc_info:
            builder.combine(builder.element("a"), "|", builder.element("b"))
        assert exc_info.value.token == "|"


class TestToXPath:
    """Tests for XPath export."""

    def test_element_with_id(self, builder):
        """Test element and id translation."""
        xpath = builder.element("div").id("main").to_xpath()
        assert xpath.startswith("descendant-or-self::div")
        assert "@id = 'main'" in xpath

    def test_class(self, builder):
        """Test class translation."""
        xpath = builder.element("p").class_("lead").to_xpath()
        assert "lead" in xpath
        assert "@class" in xpath

    def test_combined(self, builder):
        """Test child combination translation."""
        combined = builder.combine(builder.element("ul"), ">", builder.element("li"))
        assert combined.to_xpath() == "descendant-or-self::ul/li"

    def test_xml_translator_without_prefix(self, builder):
        """Test translator and prefix overrides."""
        xpath = builder.element("item").to_xpath(translator="xml", prefix="")
        assert xpath == "item"

    def test_options_defaults(self):
        """Test translator defaults come from builder options."""
        builder = SelectorBuilder(BuilderOptions(xpath_prefix="descendant::"))
        assert builder.element("a").to_xpath() == "descendant::a"

    def test_syntax_error(self, builder):
        """Test untranslatable text raises SelectorSyntaxError."""
        selector = builder.element("div").attr("")
        with pytest.raises(SelectorSyntaxError) as exc_info:
            selector.to_xpath()
        assert exc_info.value.selector == "div[]"
