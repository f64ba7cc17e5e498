"""Tests for capability registry (register, CAPABILITIES)."""

from deploy.capabilities.context import StackContext
from deploy.capabilities.openings import openings_handler
from deploy.capabilities.registry import (
    CAPABILITIES,
    CapabilityDef,
    register,
)


def test_register_adds_to_capabilities() -> None:
    """A function decorated with @register appears in CAPABILITIES."""
    name = "test_foo_cap"

    @register(name)
    def foo_handler(section_config: dict, ctx: StackContext) -> None:
        pass

    assert name in CAPABILITIES
    cap = CAPABILITIES[name]
    assert isinstance(cap, CapabilityDef)
    assert cap.handler is foo_handler

    del CAPABILITIES[name]


def test_register_returns_original_function() -> None:
    def bar_handler(section_config: dict, ctx: StackContext) -> None:
        pass

    assert register("test_bar_cap")(bar_handler) is bar_handler
    del CAPABILITIES["test_bar_cap"]


def test_openings_capability_is_registered() -> None:
    """Importing the capabilities package registers the openings handler."""
    assert CAPABILITIES["openings"].handler is openings_handler
