"""Tests for the namespace transform."""

import pytest

from stylegen.errors import InvalidNamespaceError
from stylegen.model import Declaration, StyleNode, Stylesheet
from stylegen.transforms import (
    NamespaceTransform,
    apply_namespace,
    apply_transforms,
    class_namespaced,
    selector_namespaced,
)


# ---------------------------------------------------------------------------
# Selector rewriting
# ---------------------------------------------------------------------------


class TestSelectorNamespaced:
    def test_root_sentinel(self):
        assert selector_namespaced("frame", ".") == ".frame"

    def test_single_class(self):
        assert selector_namespaced("frame", ".text-anim") == ".frame__text-anim"

    def test_descendant_classes(self):
        assert selector_namespaced("frame", ".hide .layer") == ".frame__hide .frame__layer"

    def test_element_preserved(self):
        assert selector_namespaced("frame", ".hide button") == ".frame__hide button"

    def test_compound_classes(self):
        assert (
            selector_namespaced("frame", ".expand_corners.hovered button .highlight")
            == ".frame__expand_corners.frame__hovered button .frame__highlight"
        )

    def test_comma_list(self):
        assert (
            selector_namespaced("frame", ".expand_corners,.hovered button .highlight")
            == ".frame__expand_corners,.frame__hovered button .frame__highlight"
        )

    def test_pseudo_class_between_classes(self):
        assert selector_namespaced("ns", ".a:hover.b") == ".ns__a:hover.ns__b"

    def test_pseudo_element(self):
        assert selector_namespaced("ns", ".a::before") == ".ns__a::before"

    def test_no_classes_unchanged(self):
        assert selector_namespaced("ns", "div > p:first-child") == "div > p:first-child"

    def test_class_on_element(self):
        assert selector_namespaced("ns", "button.primary") == "button.ns__primary"

    def test_class_inside_not(self):
        assert selector_namespaced("ns", "li:not(.done)") == "li:not(.ns__done)"

    def test_custom_ident_class(self):
        assert selector_namespaced("ns", ".--foo") == ".ns__--foo"

    def test_non_ascii_class(self):
        assert selector_namespaced("ns", ".ñav .a") == ".ns__ñav .ns__a"

    def test_escaped_dot_stays_in_class(self):
        assert selector_namespaced("ns", r".a\.b .c") == r".ns__a\.b .ns__c"

    def test_escaped_dot_outside_class(self):
        assert selector_namespaced("ns", r"#x\.y") == r"#x\.y"

    def test_id_unchanged(self):
        assert selector_namespaced("ns", "#main .a") == "#main .ns__a"

    def test_whitespace_preserved(self):
        assert selector_namespaced("ns", ".a  >  .b") == ".ns__a  >  .ns__b"

    def test_attribute_selector_untouched(self):
        assert (
            selector_namespaced("ns", 'a[href$=".pdf"].doc')
            == 'a[href$=".pdf"].ns__doc'
        )

    def test_at_rule_unchanged(self):
        header = "@media screen and (max-width: 800px)"
        assert selector_namespaced("ns", header) == header


class TestClassNamespaced:
    def test_single(self):
        assert class_namespaced("frame", "text-anim") == "frame__text-anim"

    def test_multiple(self):
        assert class_namespaced("frame", "hide  layer") == "frame__hide frame__layer"

    def test_empty(self):
        assert class_namespaced("frame", "  ") == "frame"


class TestNamespaceValidation:
    @pytest.mark.parametrize("bad", ["", "has space", "a__b", ".dot", "1abc"])
    def test_rejected(self, bad):
        with pytest.raises(InvalidNamespaceError):
            NamespaceTransform(bad)

    def test_hyphen_allowed(self):
        assert NamespaceTransform("my-frame").namespace == "my-frame"


# ---------------------------------------------------------------------------
# Tree rewriting
# ---------------------------------------------------------------------------


class TestNamespaceTransform:
    def test_root_node(self):
        tree = StyleNode(".", [("display", "block")])
        result = NamespaceTransform("frame").apply(tree)
        assert result.selector == ".frame"
        assert result.declarations == tree.declarations

    def test_children_inside_at_rule(self):
        tree = StyleNode(
            "@media screen and (max-width: 800px)",
            (),
            [StyleNode(".layer", [("width", "100%")])],
        )
        result = apply_namespace(tree, "frame")
        assert result.selector == "@media screen and (max-width: 800px)"
        assert result.children[0].selector == ".frame__layer"

    def test_deep_nesting(self):
        tree = StyleNode(".a", (), [StyleNode(".b", (), [StyleNode(".c")])])
        result = apply_namespace(tree, "x")
        assert [n.selector for n in result.walk()] == [".x__a", ".x__b", ".x__c"]

    def test_input_not_mutated(self):
        tree = StyleNode(".a", [("color", "red")], [StyleNode(".b")])
        apply_namespace(tree, "x")
        assert tree.selector == ".a"
        assert tree.children[0].selector == ".b"

    def test_declarations_untouched(self):
        decls = (Declaration("background_color", "red"), Declaration("opacity", 0))
        result = apply_namespace(StyleNode(".a", decls), "x")
        assert result.declarations == decls

    def test_stylesheet(self):
        sheet = Stylesheet([StyleNode("."), StyleNode(".hide .layer")])
        result = apply_namespace(sheet, "frame")
        assert isinstance(result, Stylesheet)
        assert [n.selector for n in result] == [".frame", ".frame__hide .frame__layer"]

    def test_apply_transforms_in_order(self):
        tree = StyleNode(".a")
        result = apply_transforms(tree, [NamespaceTransform("x"), NamespaceTransform("y")])
        assert result.selector == ".y__x__a"

    def test_apply_transforms_empty(self):
        tree = StyleNode(".a")
        assert apply_transforms(tree, []) is tree
