"""Stack context: config, provider, shared outputs, exports, and registered resources."""

from dataclasses import dataclass, field
from typing import Any

import pulumi_aws

from deploy.config import DeployConfig
from deploy.database.dynamodb import TableDescription


@dataclass
class StackContext:
    """Scope passed to capability handlers.

    Holds the parsed config and AWS provider, key-value outputs shared between
    capabilities, stack exports, and every resource description registered for
    synthesis. With synth_only set, builders register descriptions but declare
    nothing to the Pulumi engine.
    """

    config: DeployConfig
    aws_provider: pulumi_aws.Provider | None
    synth_only: bool = False
    _outputs: dict[str, Any] = field(default_factory=dict)
    _exports: dict[str, Any] = field(default_factory=dict)
    _resources: dict[str, TableDescription] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> None:
        """Store a value for later use by other capabilities."""
        self._outputs[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve a value; return default if key is missing."""
        return self._outputs.get(key, default)

    def require(self, key: str) -> Any:
        """Retrieve a value; raise RuntimeError with available keys if missing."""
        if key not in self._outputs:
            available = ", ".join(sorted(self._outputs.keys())) or "(none)"
            raise RuntimeError(
                f"missing required key: {key!r}. Available keys: {available}"
            )
        return self._outputs[key]

    def export(self, key: str, value: Any) -> None:
        """Register a Pulumi stack export."""
        self._exports[key] = value

    @property
    def exports(self) -> dict[str, Any]:
        """Return all registered Pulumi exports."""
        return dict(self._exports)

    def register(self, resource_id: str, description: TableDescription) -> None:
        """Record a resource description under a scope-unique id."""
        if resource_id in self._resources:
            raise RuntimeError(f"duplicate resource id in stack: {resource_id!r}")
        self._resources[resource_id] = description

    @property
    def resources(self) -> dict[str, TableDescription]:
        return dict(self._resources)

    def synthesize(self) -> dict[str, dict[str, Any]]:
        """Render every registered description, keyed by resource id."""
        return {rid: desc.to_dict() for rid, desc in self._resources.items()}
