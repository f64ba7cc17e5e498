"""Openings capability: the opening-book position table."""

from typing import Any

import pulumi

from deploy.capabilities.context import StackContext
from deploy.capabilities.registry import register
from deploy.config import OpeningsTableConfig


@register("openings")
def openings_handler(
    section_config: dict[str, Any],
    ctx: StackContext,
) -> None:
    """Declare the openings table keyed by position.

    Positions are looked up by their FEN string, so the table has a single
    string partition key and fixed provisioned throughput.
    """
    from deploy.database.dynamodb import TableSpec, create_table

    table_config = OpeningsTableConfig.from_section(section_config)
    spec = TableSpec(
        table_name=table_config.table_name,
        partition_key_name=table_config.position_attribute_name,
        read_capacity=table_config.read_capacity,
        write_capacity=table_config.write_capacity,
    )
    resource_id = f"{ctx.config.stack_name}-Openings"
    table = create_table(ctx, resource_id, spec)

    pulumi.log.info(
        f"Openings table '{spec.table_name}' keyed by '{spec.partition_key_name}' "
        f"({spec.read_capacity} RCU / {spec.write_capacity} WCU)"
    )

    if table is None:
        ctx.export("openings_table_name", spec.table_name)
        return

    ctx.set("openings.table", table)
    ctx.set("openings.table.arn", table.arn)
    ctx.export("openings_table_name", table.name)
    ctx.export("openings_table_arn", table.arn)
