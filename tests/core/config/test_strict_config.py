from __future__ import annotations

import pytest

from envloader.core.config.errors import ConfigError, UndefinedEnvKeyError
from envloader.core.config.strict import StrictConfig
from envloader.core.schema.options import define_env_options


@pytest.fixture
def cfg() -> StrictConfig:
    schema = define_env_options({
        "PORT": {"type": "number"},
        "ALIAS_KEY": {"rename": "aliasKey"},
        "OPTIONAL": {},
    })
    return StrictConfig({"PORT": 1234, "aliasKey": "value"}, schema)


def test_exact_and_case_insensitive_access(cfg: StrictConfig) -> None:
    assert cfg["PORT"] == 1234
    assert cfg.PORT == 1234
    assert cfg.port == 1234
    assert cfg["Port"] == 1234


def test_rename_and_original_key_resolve_to_same_value(cfg: StrictConfig) -> None:
    assert cfg.aliasKey == "value"
    assert cfg.ALIAS_KEY == "value"
    assert cfg["aliaskey"] == "value"


def test_declared_but_unset_key_is_none(cfg: StrictConfig) -> None:
    assert cfg.OPTIONAL is None
    assert cfg["optional"] is None
    assert "OPTIONAL" not in cfg


def test_undeclared_key_raises(cfg: StrictConfig) -> None:
    with pytest.raises(UndefinedEnvKeyError, match='Undefined environment key "missing"') as exc:
        cfg.missing
    assert exc.value.key == "missing"
    assert isinstance(exc.value, ConfigError)
    assert isinstance(exc.value, KeyError)


def test_get_and_contains_follow_lookup_rules(cfg: StrictConfig) -> None:
    assert cfg.get("port") == 1234
    assert cfg.get("missing", "dflt") == "dflt"
    assert "port" in cfg
    assert "missing" not in cfg
    assert 1 not in cfg


def test_mapping_protocol_uses_output_names(cfg: StrictConfig) -> None:
    assert list(cfg) == ["PORT", "aliasKey"]
    assert len(cfg) == 2
    assert dict(cfg.items()) == {"PORT": 1234, "aliasKey": "value"}
    assert cfg.to_dict() == {"PORT": 1234, "aliasKey": "value"}
    assert cfg == {"PORT": 1234, "aliasKey": "value"}


def test_is_read_only(cfg: StrictConfig) -> None:
    with pytest.raises(TypeError):
        cfg.PORT = 1
    with pytest.raises(TypeError):
        del cfg.PORT
    with pytest.raises(TypeError):
        cfg["PORT"] = 1  # type: ignore[index]


def test_private_attributes_are_not_config_keys(cfg: StrictConfig) -> None:
    with pytest.raises(AttributeError):
        cfg._private


def test_repr_does_not_trigger_lookup(cfg: StrictConfig) -> None:
    assert repr(cfg) == "StrictConfig({'PORT': 1234, 'aliasKey': 'value'})"
    assert str(cfg) == repr(cfg)


def test_without_schema_only_values_resolve() -> None:
    cfg = StrictConfig({"A": 1})
    assert cfg.a == 1
    with pytest.raises(UndefinedEnvKeyError):
        cfg["B"]
