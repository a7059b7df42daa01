from __future__ import annotations

import argparse
import sys
from typing import Sequence

from chaindeploy.config.settings import get_settings
from chaindeploy.logging import configure_logging


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--target",
        required=True,
        help="Importable module defining resolve_factory and build_plan",
    )
    parser.add_argument("--config", dest="config_path", help="Deploy file (YAML)")
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="CONTRACT",
        help="Only process these contracts",
    )
    parser.add_argument("--registry", dest="registry_address", help="Existing registry address")
    parser.add_argument("--output", choices=["text", "json"], default="text", help="Output format")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chaindeploy", description="Ordered contract deployment")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    deploy_parser = subparsers.add_parser("deploy", help="Deploy and register a target's contracts")
    _add_common_arguments(deploy_parser)

    plan_parser = subparsers.add_parser("plan", help="Preview the deployment order without deploying")
    _add_common_arguments(plan_parser)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level, json_logs=settings.json_logs)

    kwargs = {
        "target": args.target,
        "config_path": args.config_path,
        "only": args.only,
        "registry_address": args.registry_address,
        "output_format": args.output,
    }

    if args.command == "deploy":
        from chaindeploy.cli.deploy import deploy_command

        sys.exit(deploy_command(**kwargs))

    if args.command == "plan":
        from chaindeploy.cli.plan import plan_command

        sys.exit(plan_command(**kwargs))


if __name__ == "__main__":  # pragma: no cover
    main()
