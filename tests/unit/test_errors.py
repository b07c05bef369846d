"""Unit tests for sayaka_util.errors — ErrorKindRegistry, requires, throws
and the fault types.
"""
from __future__ import annotations

import pytest

from sayaka_util.errors import (
    ConfigurationFault,
    ErrorKindAlreadyRegisteredError,
    ErrorKindRegistry,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    PreconditionViolation,
    SayakaUtilError,
    StorageFault,
    default_registry,
    error_kind,
    requires,
    throws,
)


class QuotaExceeded(Exception):
    pass


class Labelled(Exception):
    def __init__(self, label: str = "default") -> None:
        self.label = label
        super().__init__(label)


def _fresh_registry() -> ErrorKindRegistry:
    return ErrorKindRegistry("test")


# ===========================================================================
# requires
# ===========================================================================


class TestRequires:
    def test_true_condition_never_raises(self) -> None:
        requires(True, InvalidArgumentError, "ignored")
        requires(True, InvalidArgumentError)

    def test_true_condition_ignores_unregistered_kind(self) -> None:
        requires(True, QuotaExceeded, "never built")

    def test_false_condition_raises_kind_with_message(self) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            requires(False, InvalidArgumentError, "m")
        assert type(info.value) is InvalidArgumentError
        assert info.value.message == "m"
        assert str(info.value) == "m"

    def test_false_condition_without_message_uses_default(self) -> None:
        with pytest.raises(PermissionDeniedError) as info:
            requires(False, PermissionDeniedError)
        assert info.value.message == PermissionDeniedError.default_message

    def test_builtin_kind_with_message(self) -> None:
        with pytest.raises(ValueError, match="bad value"):
            requires(False, ValueError, "bad value")

    def test_builtin_kind_without_message(self) -> None:
        with pytest.raises(RuntimeError) as info:
            requires(False, RuntimeError)
        assert info.value.args == ()

    def test_message_none_takes_messageless_path(self) -> None:
        registry = _fresh_registry()
        registry.register(
            Labelled,
            without_message=lambda: Labelled("no-message path"),
            with_message=lambda m: Labelled(f"message path: {m}"),
        )
        with pytest.raises(Labelled) as info:
            requires(False, Labelled, None, registry=registry)
        assert info.value.label == "no-message path"

    def test_message_path_uses_message_factory(self) -> None:
        registry = _fresh_registry()
        registry.register(
            Labelled,
            without_message=lambda: Labelled("no-message path"),
            with_message=lambda m: Labelled(f"message path: {m}"),
        )
        with pytest.raises(Labelled) as info:
            requires(False, Labelled, "x", registry=registry)
        assert info.value.label == "message path: x"

    def test_empty_message_is_still_a_message(self) -> None:
        with pytest.raises(NotFoundError) as info:
            requires(False, NotFoundError, "")
        assert info.value.message == ""


# ===========================================================================
# throws
# ===========================================================================


class TestThrows:
    def test_always_raises(self) -> None:
        with pytest.raises(NotFoundError, match="no such user"):
            throws(NotFoundError, "no such user")

    def test_unregistered_kind_is_configuration_fault(self) -> None:
        with pytest.raises(ConfigurationFault) as info:
            throws(QuotaExceeded)
        assert info.value.kind is QuotaExceeded

    def test_missing_message_variant_is_configuration_fault(self) -> None:
        registry = _fresh_registry()
        registry.register(QuotaExceeded)
        with pytest.raises(ConfigurationFault, match="message-accepting"):
            throws(QuotaExceeded, "too many", registry=registry)

    def test_kind_without_message_variant_builds_default(self) -> None:
        registry = _fresh_registry()
        registry.register(QuotaExceeded)
        with pytest.raises(QuotaExceeded):
            throws(QuotaExceeded, registry=registry)


# ===========================================================================
# ErrorKindRegistry
# ===========================================================================


class TestErrorKindRegistry:
    def test_empty_on_creation(self) -> None:
        assert len(_fresh_registry()) == 0

    def test_register_and_contains(self) -> None:
        registry = _fresh_registry()
        registry.register(QuotaExceeded)
        assert QuotaExceeded in registry
        assert Labelled not in registry

    def test_duplicate_registration_raises(self) -> None:
        registry = _fresh_registry()
        registry.register(QuotaExceeded)
        with pytest.raises(ErrorKindAlreadyRegisteredError) as info:
            registry.register(QuotaExceeded)
        assert info.value.kind is QuotaExceeded
        assert info.value.registry_name == "test"

    def test_overwrite_replaces_factories(self) -> None:
        registry = _fresh_registry()
        registry.register(Labelled)
        registry.register(Labelled, without_message=lambda: Labelled("new"), overwrite=True)
        assert registry.build(Labelled).label == "new"

    def test_non_exception_rejected(self) -> None:
        with pytest.raises(TypeError):
            _fresh_registry().register(int)  # type: ignore[type-var]

    def test_factories_for_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationFault):
            _fresh_registry().factories(QuotaExceeded)

    def test_default_factory_calls_kind(self) -> None:
        registry = _fresh_registry()
        registry.register(Labelled)
        assert registry.build(Labelled).label == "default"

    def test_repr_lists_kinds(self) -> None:
        registry = _fresh_registry()
        registry.register(QuotaExceeded)
        assert "QuotaExceeded" in repr(registry)

    def test_default_registry_has_builtin_kinds(self) -> None:
        for kind in (PreconditionViolation, InvalidArgumentError, PermissionDeniedError, NotFoundError):
            assert kind in default_registry


# ===========================================================================
# error_kind decorator
# ===========================================================================


class TestErrorKindDecorator:
    def test_registers_with_message_variant(self) -> None:
        registry = _fresh_registry()

        @error_kind(registry)
        class Banned(Exception):
            pass

        with pytest.raises(Banned, match="spam"):
            requires(False, Banned, "spam", registry=registry)

    def test_registers_without_message_variant(self) -> None:
        registry = _fresh_registry()

        @error_kind(registry, message=False)
        class Muted(Exception):
            pass

        with pytest.raises(Muted):
            requires(False, Muted, registry=registry)
        with pytest.raises(ConfigurationFault):
            requires(False, Muted, "why", registry=registry)

    def test_returns_class_unchanged(self) -> None:
        registry = _fresh_registry()

        class Plain(Exception):
            pass

        assert error_kind(registry)(Plain) is Plain


# ===========================================================================
# Fault hierarchy
# ===========================================================================


class TestFaults:
    def test_configuration_fault_is_not_a_precondition_violation(self) -> None:
        assert not issubclass(ConfigurationFault, PreconditionViolation)

    def test_library_faults_share_base(self) -> None:
        for kind in (PreconditionViolation, StorageFault):
            assert issubclass(kind, SayakaUtilError)

    def test_configuration_fault_outside_library_base(self) -> None:
        assert issubclass(ConfigurationFault, RuntimeError)
        assert not issubclass(ConfigurationFault, SayakaUtilError)

    def test_library_handler_does_not_absorb_configuration_fault(self) -> None:
        with pytest.raises(ConfigurationFault):
            try:
                throws(QuotaExceeded, "x")
            except SayakaUtilError:
                pytest.fail("ConfigurationFault was caught as a library fault")

    def test_storage_fault_carries_path_and_reason(self) -> None:
        fault = StorageFault("a/b.txt", "File does not exist")
        assert fault.path == "a/b.txt"
        assert fault.reason == "File does not exist"
        assert str(fault) == "File does not exist: a/b.txt"

    def test_subclass_default_messages_differ(self) -> None:
        assert InvalidArgumentError().message != NotFoundError().message
