"""
myopic-deploy CLI: validate and synth. Works offline; never calls the Pulumi engine
or AWS. Deploy with `pulumi up -C deploy` and DEPLOY_YAML_PATH set.
"""

import json
import os
from pathlib import Path
import sys

import jsonschema
import yaml

from deploy.config import DeployConfig
from deploy.spec.validator import validate_deploy_spec

DEFAULT_REGION = "us-east-1"


def _resolve(path_arg: str) -> Path:
    path = Path(path_arg)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(1)
    return path


# --- validate ---


def _cmd_validate(deploy_yaml_path: str) -> None:
    path = _resolve(deploy_yaml_path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        validate_deploy_spec(data)
    except yaml.YAMLError as e:
        print(f"{path} is not valid YAML: {e}", file=sys.stderr)
        sys.exit(1)
    except (jsonschema.ValidationError, ValueError) as e:
        message = e.message if isinstance(e, jsonschema.ValidationError) else str(e)
        print(message, file=sys.stderr)
        sys.exit(1)
    print(f"{path}: OK")


# --- synth ---


def _cmd_synth(deploy_yaml_path: str, output_format: str, region: str) -> None:
    from deploy.stack import synthesize

    path = _resolve(deploy_yaml_path)
    config = DeployConfig.from_file(str(path), region=region)
    template = synthesize(config)
    if output_format == "json":
        print(json.dumps(template, indent=2))
    else:
        print(yaml.safe_dump(template, default_flow_style=False, sort_keys=False), end="")


def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate deploy.yaml and render the declared resources without deploying."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    validate_p = sub.add_parser("validate", help="Check deploy.yaml against its schema")
    validate_p.add_argument("deploy_yaml", help="Path to deploy.yaml")
    synth_p = sub.add_parser("synth", help="Print the resource template for deploy.yaml")
    synth_p.add_argument("deploy_yaml", help="Path to deploy.yaml")
    synth_p.add_argument("--format", choices=["yaml", "json"], default="yaml")
    synth_p.add_argument(
        "--region",
        default=os.environ.get("AWS_REGION", DEFAULT_REGION),
        help="AWS region recorded in the config (default: $AWS_REGION or us-east-1)",
    )
    args = parser.parse_args()

    if args.command == "validate":
        _cmd_validate(args.deploy_yaml)
    elif args.command == "synth":
        _cmd_synth(args.deploy_yaml, args.format, args.region)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
