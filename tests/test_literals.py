import json

from api_docs_kit.generator.literals import (
    CSHARP_LITERAL,
    GO_LITERAL,
    JAVA_LITERAL,
    JSON_LITERAL,
    PYTHON_LITERAL,
    RUBY_LITERAL,
    render_literal,
)


class TestRenderLiteral:
    def test_json_style_matches_json_dumps(self):
        value = {"a": {"b": [1, 2]}, "c": "d", "e": None, "f": True}
        assert render_literal(value, JSON_LITERAL) == json.dumps(value, indent=2)

    def test_python_tokens(self):
        rendered = render_literal({"a": [1, True, None]}, PYTHON_LITERAL)
        assert rendered == '{\n    "a": [\n        1,\n        True,\n        None\n    ]\n}'

    def test_go_trailing_commas(self):
        assert render_literal({"a": "x"}, GO_LITERAL) == 'map[string]interface{}{\n    "a": "x",\n}'

    def test_ruby_hash(self):
        assert render_literal({"a": None}, RUBY_LITERAL) == '{\n  "a" => nil\n}'

    def test_java_and_csharp_maps(self):
        assert render_literal({"a": 1}, JAVA_LITERAL) == 'Map.of(\n    "a", 1\n)'
        assert render_literal({"a": 1}, CSHARP_LITERAL) == 'new Dictionary<string, object> {\n    ["a"] = 1\n}'

    def test_empty_containers(self):
        assert render_literal({}, JSON_LITERAL) == "{}"
        assert render_literal([], JAVA_LITERAL) == "List.of()"

    def test_indent_applies_to_nested_lines(self):
        rendered = render_literal({"a": 1}, JSON_LITERAL, indent="    ")
        assert rendered == '{\n      "a": 1\n    }'

    def test_scalars(self):
        assert render_literal("it's", JSON_LITERAL) == '"it\'s"'
        assert render_literal(1.5, PYTHON_LITERAL) == "1.5"
        assert render_literal(False, PYTHON_LITERAL) == "False"
