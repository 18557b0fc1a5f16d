import argparse
import sys

from bluecanary.cli.command.command import Command as CliCommand
from bluecanary.config import BlueCanaryConfig
from bluecanary.logger import init_logger
from bluecanary.smoke.client import PredictionClient
from bluecanary.smoke.harness import SmokeSuite

logger = init_logger("bluecanary.cli.smoke")


class SmokeCommand(CliCommand):
    name = "smoke"

    async def arun(self, args: argparse.Namespace):
        smoke_config = BlueCanaryConfig.from_env(args.config).smoke
        if args.host:
            smoke_config.instance_ip = args.host
        if args.port:
            smoke_config.port = args.port
        if not smoke_config.instance_ip:
            raise ValueError("Canary instance address is required (--host or BLUECANARY_CANARY_INSTANCE_IP)")

        requests = args.requests if args.requests is not None else smoke_config.load_requests
        logger.info(f"Running smoke suite against {smoke_config.base_url} with {requests} load requests")
        with PredictionClient(smoke_config.base_url, timeout=smoke_config.timeout) as client:
            report = SmokeSuite(client).run(load_requests=requests)

        print(report.summary())
        if not report.ok:
            sys.exit(1)

    @staticmethod
    async def add_parser_to(subparsers: argparse._SubParsersAction):
        smoke_parser = subparsers.add_parser("smoke", help="Smoke test a deployed canary instance")
        smoke_parser.add_argument("--host", help="instance IP or hostname (default: BLUECANARY_CANARY_INSTANCE_IP)")
        smoke_parser.add_argument("--port", type=int, help="instance port (default: smoke.port from config)")
        smoke_parser.add_argument("--requests", type=int, help="number of load requests (default: 100)")
