"""
Pulumi program: declares the myopic database stack from deploy.yaml.
Reads DEPLOY_YAML_PATH, creates the tagged AWS provider, runs every declared
capability, and exports the resulting stack outputs.
"""
import pulumi

from deploy.capabilities.context import StackContext
from deploy.config import create_aws_provider, load_deploy_config
from deploy.stack import provision_stack

config = load_deploy_config()
aws_provider = create_aws_provider(config.stack_name, config.region)
ctx = StackContext(config=config, aws_provider=aws_provider)

provision_stack(config, ctx)

for key, value in ctx.exports.items():
    pulumi.export(key, value)
