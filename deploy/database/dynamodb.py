"""DynamoDB Table provisioning."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pulumi
import pulumi_aws

if TYPE_CHECKING:
    from deploy.capabilities.context import StackContext

BILLING_MODE = "PROVISIONED"
REMOVAL_POLICY = "DESTROY"

# Descriptive attribute type -> DynamoDB scalar type code.
ATTRIBUTE_TYPES = {"STRING": "S"}


@dataclass(frozen=True)
class TableSpec:
    """Caller-supplied parameters for a single-key provisioned table."""

    table_name: str
    partition_key_name: str
    read_capacity: int
    write_capacity: int
    partition_key_type: str = "STRING"
    removal_policy: str = REMOVAL_POLICY


@dataclass(frozen=True)
class TableDescription:
    """Declarative description of a table resource, ready for synthesis."""

    name: str
    billing_mode: str
    read_capacity: int
    write_capacity: int
    removal_policy: str
    partition_key_name: str
    partition_key_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "billingMode": self.billing_mode,
            "readCapacity": self.read_capacity,
            "writeCapacity": self.write_capacity,
            "removalPolicy": self.removal_policy,
            "partitionKey": {
                "name": self.partition_key_name,
                "type": self.partition_key_type,
            },
        }


def describe_table(spec: TableSpec) -> TableDescription:
    """Map a TableSpec to its table description.

    Billing is always PROVISIONED and removal always DESTROY. Capacities and
    names are passed through as given; the provider rejects bad values at
    deploy time.
    """
    return TableDescription(
        name=spec.table_name,
        billing_mode=BILLING_MODE,
        read_capacity=spec.read_capacity,
        write_capacity=spec.write_capacity,
        removal_policy=REMOVAL_POLICY,
        partition_key_name=spec.partition_key_name,
        partition_key_type="STRING",
    )


def create_table(
    scope: "StackContext",
    resource_id: str,
    spec: TableSpec,
) -> pulumi_aws.dynamodb.Table | None:
    """Register the table description with scope and declare the Pulumi table.

    In synth-only scopes nothing is declared to the engine and None is returned.
    """
    description = describe_table(spec)
    scope.register(resource_id, description)
    if scope.synth_only:
        return None

    return pulumi_aws.dynamodb.Table(
        resource_id,
        name=description.name,
        billing_mode=description.billing_mode,
        read_capacity=description.read_capacity,
        write_capacity=description.write_capacity,
        hash_key=description.partition_key_name,
        attributes=[
            pulumi_aws.dynamodb.TableAttributeArgs(
                name=description.partition_key_name,
                type=ATTRIBUTE_TYPES[description.partition_key_type],
            )
        ],
        tags={"Name": description.name},
        # DESTROY: deleted with the stack, never protected or retained.
        opts=pulumi.ResourceOptions(
            provider=scope.aws_provider,
            protect=False,
            retain_on_delete=False,
        ),
    )
