import argparse

import uvicorn

from bluecanary.cli.command.command import Command as CliCommand
from bluecanary.config import BlueCanaryConfig
from bluecanary.logger import init_logger

logger = init_logger("bluecanary.cli.serve")


class ServeCommand(CliCommand):
    name = "serve"

    async def arun(self, args: argparse.Namespace):
        from bluecanary.service.server import app

        service_config = BlueCanaryConfig.from_env(args.config).service
        host = args.host or service_config.host
        port = args.port or service_config.port
        app.state.model_path = args.model_path or service_config.model_path

        logger.info(f"Starting sentiment service on {host}:{port}")
        server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, access_log=False))
        await server.serve()

    @staticmethod
    async def add_parser_to(subparsers: argparse._SubParsersAction):
        serve_parser = subparsers.add_parser("serve", help="Run the sentiment prediction service")
        serve_parser.add_argument("--host", help="bind address (default: service.host from config)")
        serve_parser.add_argument("--port", type=int, help="port (default: service.port from config)")
        serve_parser.add_argument("--model-path", help="joblib model artifact; the bundled model is used if absent")
