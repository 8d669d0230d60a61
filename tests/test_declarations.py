"""
Tests for the declaration classifier.

Covers:
1. Property classification (breakpoint, option, other)
2. The typed value grammar, in both token orders
3. Custom values and parse errors
4. Filtering declaration lists in place
"""

from decimal import Decimal

import pytest

from mqbreakpoints.declarations import (
    DeclarationClass,
    TypedValue,
    classify_property,
    filter_declarations,
    parse_flag,
    parse_typed_value,
    register_declaration,
)
from mqbreakpoints.errors import BreakpointParseError, DuplicateNameError
from mqbreakpoints.model import BreakpointKind, Unit
from mqbreakpoints.registry import BreakpointRegistry
from mqbreakpoints.stylesheet import Declaration, decl


class TestClassifyProperty:
    """Test property name patterns."""

    @pytest.mark.parametrize("prop", [
        "breakpoint-palm",
        "var-breakpoint-palm",
        "BREAKPOINT-Palm",
        "breakpoint-desk-wide",
    ])
    def test_breakpoint_properties(self, prop):
        assert classify_property(prop) is DeclarationClass.BREAKPOINT

    @pytest.mark.parametrize("prop", [
        "breakpoints-device",
        "var-breakpoints-use-only",
        "Breakpoints-Device",
    ])
    def test_option_properties(self, prop):
        assert classify_property(prop) is DeclarationClass.OPTION

    @pytest.mark.parametrize("prop", [
        "display",
        "breakpoint",
        "breakpoint-",
        "my-breakpoint-palm",
        "var-foo",
        None,
        "",
    ])
    def test_other_properties(self, prop):
        assert classify_property(prop) is DeclarationClass.OTHER


class TestParseFlag:
    """Test option flag values."""

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " Yes "])
    def test_true_values(self, value):
        assert parse_flag(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "on", "", None])
    def test_false_values(self, value):
        assert parse_flag(value) is False


class TestParseTypedValue:
    """Test the typed breakpoint grammar."""

    def test_type_then_point(self):
        result = parse_typed_value("max 340px")
        assert result == TypedValue(BreakpointKind.MAX, Decimal("340"), Unit.PX)

    def test_point_then_type(self):
        """'1000px min' is accepted too."""
        result = parse_typed_value("1000px min")
        assert result == TypedValue(BreakpointKind.MIN, Decimal("1000"), Unit.PX)

    def test_em_and_rem(self):
        assert parse_typed_value("min 80em").unit is Unit.EM
        assert parse_typed_value("max 37.5rem").value == Decimal("37.5")

    def test_trailing_dot_in_number(self):
        """Numbers follow [0-9.]+, so "1000.px" is 1000px."""
        result = parse_typed_value("min 1000.px")
        assert result == TypedValue(BreakpointKind.MIN, Decimal("1000"), Unit.PX)

    def test_case_and_whitespace(self):
        """Extra whitespace and upper case are ignored."""
        result = parse_typed_value("  MAX \t 340PX ")
        assert result == TypedValue(BreakpointKind.MAX, Decimal("340"), Unit.PX)

    @pytest.mark.parametrize("value", [
        "(orientation: landscape)",
        "screen and (min-width: 20px)",
        "print",
        "(min-resolution: 2dppx)",
    ])
    def test_custom_values(self, value):
        """Anything not meant as typed is a custom query."""
        assert parse_typed_value(value) is None

    @pytest.mark.parametrize("value", [
        "max",
        "340px",
        "min 100px 200px",
        "max 340px wide",
    ])
    def test_wrong_token_count(self, value):
        result = parse_typed_value(value)
        assert isinstance(result, BreakpointParseError)
        assert "not in the format" in str(result)

    @pytest.mark.parametrize("value", [
        "min 100",
        "max 340pt",
        "min max",
        "100px 200px",
        "wide 100px",
    ])
    def test_missing_type_or_point(self, value):
        result = parse_typed_value(value)
        assert isinstance(result, BreakpointParseError)
        assert "missing type or point" in str(result)


class TestRegisterDeclaration:
    """Test registering single declarations."""

    def test_typed_breakpoint(self):
        registry = BreakpointRegistry()
        assert register_declaration("breakpoint-Palm", "max 340px", registry)
        bp = registry.get("palm")
        assert bp.kind is BreakpointKind.MAX
        assert bp.point == "340px"

    def test_var_syntax(self):
        registry = BreakpointRegistry()
        assert register_declaration("var-breakpoint-desk", "min 80em", registry)
        assert registry.get("desk").point == "80em"

    def test_custom_breakpoint_kept_verbatim(self):
        registry = BreakpointRegistry()
        register_declaration("breakpoint-landscape", " (orientation: landscape) ", registry)
        bp = registry.get("landscape")
        assert bp.kind is BreakpointKind.CUSTOM
        assert bp.raw == "(orientation: landscape)"

    def test_option(self):
        registry = BreakpointRegistry()
        assert register_declaration("breakpoints-device", "true", registry)
        assert register_declaration("var-breakpoints-use-only", "no", registry)
        assert registry.options == {"device": True, "use-only": False}

    def test_unknown_option_warns(self):
        registry = BreakpointRegistry()
        with pytest.warns(UserWarning, match="Unknown breakpoints option"):
            assert register_declaration("breakpoints-landscape", "yes", registry)
        assert registry.options == {"landscape": True}

    def test_unrelated_declaration(self):
        registry = BreakpointRegistry()
        assert not register_declaration("display", "none", registry)
        assert not register_declaration(None, None, registry)
        assert len(registry) == 0

    def test_parse_error_names_breakpoint(self):
        registry = BreakpointRegistry()
        with pytest.raises(BreakpointParseError) as exc:
            register_declaration("breakpoint-Mobile", "max 340", registry)
        assert exc.value.name == "mobile"
        assert 'Error in breakpoint "mobile"' in str(exc.value)

    def test_empty_value_is_error(self):
        registry = BreakpointRegistry()
        with pytest.raises(BreakpointParseError):
            register_declaration("breakpoint-palm", "  ", registry)


class TestFilterDeclarations:
    """Test filtering declaration lists."""

    def test_consecutive_breakpoints_all_removed(self):
        """Removing an entry must not skip the next one."""
        registry = BreakpointRegistry()
        declarations = [
            decl("breakpoint-palm", "max 340px"),
            decl("breakpoint-tab", "max 700px"),
            decl("color", "red"),
            decl("breakpoints-device", "1"),
            decl("breakpoint-desk", "min 1000px"),
        ]
        consumed = filter_declarations(declarations, registry)
        assert consumed == 4
        assert [d.property for d in declarations] == ["color"]
        assert len(registry) == 3

    def test_filters_same_list_object(self):
        registry = BreakpointRegistry()
        declarations = [decl("breakpoint-palm", "max 340px")]
        alias = declarations
        filter_declarations(declarations, registry)
        assert alias == []

    def test_comments_are_kept(self):
        registry = BreakpointRegistry()
        comment = Declaration(type="comment", comment=" breakpoints ")
        declarations = [comment, decl("breakpoint-palm", "max 340px")]
        filter_declarations(declarations, registry)
        assert declarations == [comment]

    def test_duplicate_propagates(self):
        registry = BreakpointRegistry()
        declarations = [
            decl("breakpoint-mobile", "max 340px"),
            decl("breakpoint-MOBILE", "max 600px"),
        ]
        with pytest.raises(DuplicateNameError):
            filter_declarations(declarations, registry)
