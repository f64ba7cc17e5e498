"""Stack assembly: run the capability handler of every declared spec section."""

from typing import Any

from deploy.capabilities.context import StackContext
from deploy.capabilities.registry import CAPABILITIES
from deploy.config import DeployConfig


def provision_stack(config: DeployConfig, ctx: StackContext) -> None:
    """Run handlers for declared sections, in registry order.

    A declared section with no registered capability is an error rather than
    being silently skipped.
    """
    declared = config.spec_sections
    unknown = sorted(set(declared) - set(CAPABILITIES))
    if unknown:
        raise RuntimeError(f"no capability registered for section(s): {', '.join(unknown)}")

    for name, cap in CAPABILITIES.items():
        if name in declared:
            cap.handler(declared[name], ctx)


def synthesize(config: DeployConfig) -> dict[str, dict[str, Any]]:
    """Assemble the stack without the Pulumi engine and return its template."""
    ctx = StackContext(config=config, aws_provider=None, synth_only=True)
    provision_stack(config, ctx)
    return ctx.synthesize()
