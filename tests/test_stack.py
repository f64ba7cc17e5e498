"""Tests for stack assembly (provision_stack, synthesize)."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from deploy.capabilities.context import StackContext
from deploy.config import DeployConfig
from deploy.stack import provision_stack, synthesize

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"

OPENINGS = {
    "tableName": "Openings",
    "positionAttributeName": "fen",
    "readCapacity": 5,
    "writeCapacity": 5,
}


def _config(raw_spec: dict) -> DeployConfig:
    return DeployConfig(stack_name="myopic-database", region="us-east-1", raw_spec=raw_spec)


@patch("deploy.database.dynamodb.pulumi_aws.dynamodb.Table")
def test_provision_stack_runs_declared_sections(mock_table: MagicMock) -> None:
    config = _config({"openings": OPENINGS})
    ctx = StackContext(config=config, aws_provider=MagicMock())

    provision_stack(config, ctx)

    mock_table.assert_called_once()
    assert list(ctx.resources) == ["myopic-database-Openings"]
    assert "openings_table_arn" in ctx.exports


@patch("deploy.database.dynamodb.pulumi_aws.dynamodb.Table")
def test_provision_stack_skips_undeclared_and_null_sections(mock_table: MagicMock) -> None:
    config = _config({"openings": None})
    ctx = StackContext(config=config, aws_provider=MagicMock())

    provision_stack(config, ctx)

    mock_table.assert_not_called()
    assert ctx.synthesize() == {}


def test_provision_stack_unknown_section_raises() -> None:
    """A declared section without a registered capability is an error."""
    config = _config({"openings": OPENINGS})
    ctx = StackContext(config=config, aws_provider=None, synth_only=True)

    with patch.object(DeployConfig, "spec_sections", {"openings": OPENINGS, "leaderboard": {}}):
        with pytest.raises(RuntimeError, match="leaderboard"):
            provision_stack(config, ctx)
    assert ctx.resources == {}


def test_synthesize_fixture() -> None:
    """The openings fixture synthesizes to one provisioned, destroyable table."""
    config = DeployConfig.from_file(str(FIXTURES / "openings.yaml"), region="eu-west-2")

    assert synthesize(config) == {
        "myopic-database-Openings": {
            "name": "Openings",
            "billingMode": "PROVISIONED",
            "readCapacity": 5,
            "writeCapacity": 5,
            "removalPolicy": "DESTROY",
            "partitionKey": {"name": "fen", "type": "STRING"},
        }
    }


def test_synthesize_empty_spec() -> None:
    config = DeployConfig.from_file(str(FIXTURES / "empty.yaml"), region="eu-west-2")
    assert synthesize(config) == {}
