"""Tests for target.py."""

import types
import sys

import pytest
from chaindeploy.config.settings import Settings
from chaindeploy.core.errors import ConfigurationError
from chaindeploy.target import load_target


def test_load_sample_target():
    target = load_target("sample_target")

    assert target.name == "sample_target"
    assert callable(target.resolve_factory)
    assert callable(target.build_plan)
    assert target.signer(Settings()) == "sample-signer"


def test_missing_module():
    with pytest.raises(ConfigurationError) as exc_info:
        load_target("no_such_target_module")
    assert exc_info.value.details["target"] == "no_such_target_module"


def test_missing_callables(monkeypatch):
    module = types.ModuleType("half_target")
    module.resolve_factory = lambda name, signer: None
    monkeypatch.setitem(sys.modules, "half_target", module)

    with pytest.raises(ConfigurationError) as exc_info:
        load_target("half_target")
    assert exc_info.value.details["missing"] == "build_plan"


def test_signer_optional(monkeypatch):
    module = types.ModuleType("signerless_target")
    module.resolve_factory = lambda name, signer: None
    module.build_plan = lambda config, registry: {}
    monkeypatch.setitem(sys.modules, "signerless_target", module)

    assert load_target("signerless_target").signer(Settings()) is None
