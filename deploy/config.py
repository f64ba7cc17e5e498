"""deploy.yaml configuration loading and validation."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

import jsonschema
import pulumi
import pulumi_aws
import yaml

from deploy.spec.validator import validate_deploy_spec


@dataclass
class OpeningsTableConfig:
    table_name: str
    position_attribute_name: str
    read_capacity: int
    write_capacity: int

    @classmethod
    def from_section(cls, section: dict[str, Any]) -> "OpeningsTableConfig":
        """Parse the spec.openings section (camelCase keys as in deploy.yaml)."""
        return cls(
            table_name=section["tableName"],
            position_attribute_name=section["positionAttributeName"],
            read_capacity=section["readCapacity"],
            write_capacity=section["writeCapacity"],
        )


@dataclass
class DeployConfig:
    """Parsed and validated deploy.yaml configuration."""

    stack_name: str
    region: str
    raw_spec: dict[str, Any]
    openings: OpeningsTableConfig | None = None

    @property
    def spec_sections(self) -> dict[str, Any]:
        """Return declared (non-None) spec section names and their config (for registry)."""
        sections = ["openings"]
        return {
            k: self.raw_spec[k]
            for k in sections
            if k in self.raw_spec and self.raw_spec[k] is not None
        }

    @classmethod
    def from_file(cls, path: str, region: str | None = None) -> "DeployConfig":
        """Load and validate deploy.yaml from file path.

        Region defaults to the Pulumi config value aws:region.
        """
        if not Path(path).exists():
            raise SystemExit(f"deploy.yaml not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                document: dict[str, Any] = yaml.safe_load(f)
            validate_deploy_spec(document)
        except yaml.YAMLError as e:
            raise SystemExit(f"deploy.yaml is not valid YAML: {e}") from e
        except (jsonschema.ValidationError, ValueError) as e:
            raise SystemExit(str(e)) from e

        metadata = document["metadata"]
        spec = document["spec"]
        if region is None:
            region = pulumi.Config("aws").require("region")

        openings = None
        if "openings" in spec and spec["openings"] is not None:
            openings = OpeningsTableConfig.from_section(spec["openings"])

        return cls(
            stack_name=metadata["name"],
            region=region,
            raw_spec=spec,
            openings=openings,
        )


def load_deploy_config() -> DeployConfig:
    """Load deploy.yaml from DEPLOY_YAML_PATH environment variable."""
    path = os.environ.get("DEPLOY_YAML_PATH")
    if not path:
        raise SystemExit("DEPLOY_YAML_PATH environment variable required")
    if not Path(path).exists():
        raise SystemExit("DEPLOY_YAML_PATH must point to deploy.yaml")
    return DeployConfig.from_file(path)


def create_aws_provider(stack_name: str, region: str) -> pulumi_aws.Provider:
    """Create AWS provider with default resource tags."""
    return pulumi_aws.Provider(
        "aws-tagged",
        region=region,
        default_tags=pulumi_aws.ProviderDefaultTagsArgs(
            tags={
                "stack": stack_name,
                "managed-by": "myopic-deploy",
            }
        ),
    )
