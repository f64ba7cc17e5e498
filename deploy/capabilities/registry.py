"""Capability registry: maps deploy.yaml spec sections to handlers."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from deploy.capabilities.context import StackContext


class CapabilityHandler(Protocol):
    """Protocol for capability handler functions."""

    def __call__(self, section_config: dict[str, Any], ctx: StackContext) -> None:
        ...


@dataclass
class CapabilityDef:
    """Registered capability handler."""

    handler: Callable[[dict[str, Any], StackContext], None]


CAPABILITIES: dict[str, CapabilityDef] = {}


def register(name: str) -> Callable[[CapabilityHandler], CapabilityHandler]:
    """Decorator to register a capability handler in CAPABILITIES."""

    def decorator(fn: CapabilityHandler) -> CapabilityHandler:
        CAPABILITIES[name] = CapabilityDef(handler=fn)
        return fn

    return decorator
