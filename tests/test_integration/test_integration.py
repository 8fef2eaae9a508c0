"""End-to-end tests: build -> namespace -> render."""

import pytest

from stylegen import (
    InvalidNamespaceError,
    RenderMode,
    RenderOptions,
    Numeric,
    Raw,
    StyleNode,
    Stylesheet,
    apply_namespace,
    css,
    generate,
    parse_style,
    render,
)
from stylegen.units import percent


class TestScenarios:
    def test_single_numeric_declaration(self):
        tree = StyleNode(".layer", [("width", Numeric(10, "px"))])
        assert render(tree, "compact") == ".layer{width:10px;}"

    def test_two_rules(self):
        sheet = Stylesheet(
            [
                StyleNode(
                    ".layer",
                    [("border", Raw("1px solid green")), ("background-color", Raw("red"))],
                ),
                StyleNode(".hide .layer", [("opacity", Numeric(0, ""))]),
            ]
        )
        assert render(sheet, "compact") == (
            ".layer{border:1px solid green;background-color:red;}.hide .layer{opacity:0;}"
        )

    def test_namespaced_root_pretty(self):
        tree = apply_namespace(StyleNode(".", [("display", Raw("block"))]), "frame")
        assert render(tree, "pretty") == ".frame {\n    display: block;\n}"


class TestPipeline:
    MAPPING = {
        ".": {"display": "block"},
        ".layer": {"background_color": "red", "border": "1px solid green"},
        "@media screen and (max-width: 900px)": {".layer": {"width": percent(100)}},
        ".hide .layer": {"opacity": 0},
    }

    EXPECTED = (
        ".frame3{display:block;}"
        ".frame3__layer{background-color:red;border:1px solid green;}"
        "@media screen and (max-width: 900px){.frame3__layer{width:100%;}}"
        ".frame3__hide .frame3__layer{opacity:0;}"
    )

    def test_builder(self):
        assert css(self.MAPPING, namespace="frame3") == self.EXPECTED

    def test_text_front_end_matches_builder(self):
        source = """
        . { display: block; }
        .layer { background_color: red; border: 1px solid green; }
        @media screen and (max-width: 900px) { .layer { width: 100%; } }
        .hide .layer { opacity: 0; }
        """
        options = RenderOptions(namespace="frame3")
        assert generate(parse_style(source), options) == self.EXPECTED

    def test_generate_accepts_node_list(self):
        nodes = [StyleNode(".a", [("color", "red")])]
        options = RenderOptions(mode=RenderMode.PRETTY, namespace="x")
        assert generate(nodes, options) == ".x__a {\n    color: red;\n}"

    def test_generate_rejects_empty_namespace(self):
        with pytest.raises(InvalidNamespaceError):
            generate(StyleNode(".a"), RenderOptions(namespace=""))

    def test_generate_defaults(self):
        assert generate(StyleNode(".a")) == ".a{}"
