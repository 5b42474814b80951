from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from envloader.core.schema.options import (
    MISSING,
    EnvOption,
    OptionSection,
    OptionType,
    define_env_options,
    iter_sections,
    string_form,
)


def test_defaults_of_env_option() -> None:
    opt = EnvOption()
    assert opt.type is OptionType.STRING
    assert opt.required is False
    assert opt.default is MISSING
    assert opt.has_default is False
    assert opt.output_name("KEY") == "KEY"


def test_none_is_a_valid_default() -> None:
    assert EnvOption(default=None).has_default is True


def test_type_and_options_are_coerced() -> None:
    opt = EnvOption(type="Number", options=["1", 2])
    assert opt.type is OptionType.NUMBER
    assert opt.options == ("1", "2")
    assert OptionType("strings") is OptionType.STRING_LIST


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        EnvOption(type="float")


def test_env_option_is_frozen() -> None:
    opt = EnvOption()
    with pytest.raises(FrozenInstanceError):
        opt.required = True  # type: ignore[misc]


def test_define_from_plain_mappings_preserves_order() -> None:
    schema = define_env_options({
        "B": {"type": "boolean", "default": True},
        "A": EnvOption(description="already built"),
        "C": {"name": "see"},
    })
    assert list(schema) == ["B", "A", "C"]
    assert schema["B"].type is OptionType.BOOLEAN
    assert schema["A"].description == "already built"
    assert schema["C"].rename == "see"
    assert schema["C"].output_name("C") == "see"


def test_define_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError, match="unknown fields for option 'PORT': typ"):
        define_env_options({"PORT": {"typ": "number"}})


def test_define_rejects_non_mapping_entries() -> None:
    with pytest.raises(TypeError):
        define_env_options({"PORT": "number"})


def test_define_flattens_sections() -> None:
    schema = define_env_options([
        OptionSection(title="Server", options={"PORT": {"type": "number"}}),
        OptionSection(title="Logging", options={"LOG_LEVEL": {}}),
    ])
    assert list(schema) == ["PORT", "LOG_LEVEL"]


def test_define_rejects_duplicate_keys_across_sections() -> None:
    with pytest.raises(ValueError, match="duplicate option 'PORT'"):
        define_env_options([
            OptionSection(title="A", options={"PORT": {}}),
            OptionSection(title="B", options={"PORT": {}}),
        ])


def test_iter_sections_wraps_plain_mapping() -> None:
    (section,) = iter_sections({"A": {}})
    assert section.title == ""
    assert isinstance(section.options["A"], EnvOption)


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (3000, "3000"),
        (3000.0, "3000"),
        (0.5, "0.5"),
        (["a", "b"], "a,b"),
        ([], ""),
        ("text", "text"),
    ],
)
def test_string_form(value, expected) -> None:
    assert string_form(value) == expected
