"""Tests for orchestration/registry.py."""

import pytest
from chaindeploy.core.errors import ConfigurationError, RegistryResolutionError
from chaindeploy.orchestration.registry import PendingRegistry, resolve_registry
from fakes import FakeRegistryFactory, FakeResolver

EXISTING = "0x" + "12" * 20


@pytest.mark.asyncio
async def test_attach_sends_no_transaction(ledger, resolver, registry_factory):
    registry = await resolve_registry(resolver, "signer", EXISTING)

    assert registry.address == EXISTING
    assert registry_factory.deploy_calls == []
    assert ledger == [("attach", "Lib_AddressManager", EXISTING)]


@pytest.mark.asyncio
async def test_deploys_exactly_one_registry_without_address(ledger, resolver, registry_factory):
    registry = await resolve_registry(resolver, "signer", None)

    assert registry_factory.deploy_calls == [()]
    assert ledger == [("deploy", "Lib_AddressManager")]
    assert registry.address.startswith("0x")


@pytest.mark.asyncio
async def test_custom_contract_name(ledger):
    factory = FakeRegistryFactory(ledger)
    resolver = FakeResolver({"AddressBook": factory})

    await resolve_registry(resolver, "signer", None, contract_name="AddressBook")

    assert resolver.calls == [("AddressBook", "signer")]


@pytest.mark.asyncio
async def test_deploy_failure_wrapped(ledger):
    factory = FakeRegistryFactory(ledger, fail_with=RuntimeError("nonce too low"))
    resolver = FakeResolver({"Lib_AddressManager": factory})

    with pytest.raises(RegistryResolutionError) as exc_info:
        await resolve_registry(resolver, "signer", None)

    assert "nonce too low" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_missing_factory_wrapped():
    resolver = FakeResolver({})

    with pytest.raises(RegistryResolutionError):
        await resolve_registry(resolver, "signer", EXISTING)


@pytest.mark.asyncio
async def test_chaindeploy_errors_propagate_unchanged():
    def resolver(name, signer):
        raise ConfigurationError("no such factory")

    with pytest.raises(ConfigurationError):
        await resolve_registry(resolver, None, None)


@pytest.mark.asyncio
async def test_pending_registry_rejects_writes():
    registry = PendingRegistry()

    assert registry.address is None
    with pytest.raises(RuntimeError):
        await registry.setAddress("a", EXISTING)
