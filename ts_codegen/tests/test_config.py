import pytest

from ts_codegen.builders import build_object_literal_decorator
from ts_codegen.config import DEFAULT_IDENTIFIER_PREFIXES, EmitterConfig, NewLineKind
from ts_codegen.ts_ast.printer import render


class TestEmitterConfig:
    """Test cases for emitter configuration"""

    def test_defaults(self):
        config = EmitterConfig()
        assert config.identifier_prefixes == list(DEFAULT_IDENTIFIER_PREFIXES)
        assert config.validate_identifiers is False
        assert config.escape_non_ascii is True
        assert config.new_line is NewLineKind.LINE_FEED
        assert config.add_generation_comment is False

    def test_default_prefixes_are_not_shared(self):
        first = EmitterConfig()
        first.identifier_prefixes.append("Op.")
        assert EmitterConfig().identifier_prefixes == list(DEFAULT_IDENTIFIER_PREFIXES)

    def test_from_dict(self):
        config = EmitterConfig.from_dict(
            {
                "identifier_prefixes": ("Op.",),
                "validate_identifiers": True,
                "escape_non_ascii": False,
                "new_line": "crlf",
                "add_generation_comment": True,
            }
        )
        assert config.identifier_prefixes == ["Op."]
        assert config.validate_identifiers is True
        assert config.escape_non_ascii is False
        assert config.new_line is NewLineKind.CARRIAGE_RETURN_LINE_FEED
        assert config.add_generation_comment is True

    def test_from_dict_ignores_unknown_keys(self):
        config = EmitterConfig.from_dict({"unknown_option": 1})
        assert not hasattr(config, "unknown_option")
        assert config.to_dict() == EmitterConfig().to_dict()

    def test_from_dict_single_prefix_string(self):
        config = EmitterConfig.from_dict({"identifier_prefixes": "DataType."})
        assert config.identifier_prefixes == ["DataType."]
        decorator = build_object_literal_decorator("Column", {"comment": "apple", "type": "DataType.STRING"}, config)
        assert render(decorator) == '@Column({ comment: "apple", type: DataType.STRING })'

    def test_from_dict_rejects_non_string_prefixes(self):
        with pytest.raises(ValueError, match="identifier_prefixes"):
            EmitterConfig.from_dict({"identifier_prefixes": ["DataType.", 1]})

    def test_from_dict_does_not_override_methods(self):
        config = EmitterConfig.from_dict({"to_dict": 1, "from_dict": 2})
        assert callable(config.to_dict)
        assert config.to_dict() == EmitterConfig().to_dict()

    def test_round_trip(self):
        config = EmitterConfig(identifier_prefixes=["Status."], new_line=NewLineKind.CARRIAGE_RETURN_LINE_FEED)
        assert EmitterConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "name, expected",
    [
        ("lf", NewLineKind.LINE_FEED),
        ("LF", NewLineKind.LINE_FEED),
        ("CRLF", NewLineKind.CARRIAGE_RETURN_LINE_FEED),
        ("LINE_FEED", NewLineKind.LINE_FEED),
        ("carriage_return_line_feed", NewLineKind.CARRIAGE_RETURN_LINE_FEED),
        ("\n", NewLineKind.LINE_FEED),
        ("\r\n", NewLineKind.CARRIAGE_RETURN_LINE_FEED),
    ],
)
def test_new_line_from_name(name, expected):
    assert NewLineKind.from_name(name) is expected


def test_new_line_from_unknown_name():
    with pytest.raises(ValueError):
        NewLineKind.from_name("cr")
