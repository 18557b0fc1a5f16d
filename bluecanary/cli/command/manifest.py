import argparse
import sys

import yaml

from bluecanary.cli.command.command import Command
from bluecanary.config import BlueCanaryConfig
from bluecanary.deployment.constants import DeploymentConstants
from bluecanary.common.exceptions import InvalidManifestError
from bluecanary.deployment.spec import DeploymentSpec, dump_manifest, load_manifest, read_document
from bluecanary.deployment.template_loader import DeploymentTemplateLoader
from bluecanary.logger import init_logger

logger = init_logger("bluecanary.cli.manifest")


class ManifestCommand(Command):
    name = "manifest"

    async def arun(self, args: argparse.Namespace):
        if not args.manifest_action:
            raise ValueError("Manifest action is required (render, validate, promote, apply, switch)")

        config = BlueCanaryConfig.from_env(args.config)
        if args.manifest_action == "render":
            await self._render(args, config)
        elif args.manifest_action == "validate":
            await self._validate(args)
        elif args.manifest_action == "promote":
            await self._promote(args)
        elif args.manifest_action == "apply":
            await self._apply(args, config)
        elif args.manifest_action == "switch":
            await self._switch(args, config)
        else:
            raise ValueError(f"Unknown manifest action '{args.manifest_action}'")

    @staticmethod
    def _emit(text: str, output: str | None) -> None:
        if output:
            with open(output, "w", encoding="utf-8") as f:
                f.write(text)
            logger.info(f"Manifest written to {output}")
        else:
            print(text, end="")

    async def _render(self, args: argparse.Namespace, config: BlueCanaryConfig):
        loader = DeploymentTemplateLoader(
            templates=config.kube.templates, default_namespace=args.namespace or config.kube.namespace
        )
        manifest = loader.build_manifest(
            template_name=args.template,
            color=args.color,
            image=args.image,
            replicas=args.replicas,
            cpus=args.cpus,
            memory=args.memory,
        )
        self._emit(yaml.safe_dump(manifest, sort_keys=False), args.output)

    async def _validate(self, args: argparse.Namespace):
        try:
            spec = load_manifest(args.file)
        except InvalidManifestError as e:
            print(f"invalid: {e}")
            sys.exit(1)
        problems = spec.problems()
        if problems:
            for problem in problems:
                print(f"invalid: {problem}")
            sys.exit(1)
        print(f"{args.file}: Deployment {spec.namespace}/{spec.name} is valid")

    async def _promote(self, args: argparse.Namespace):
        spec = load_manifest(args.file)
        promoted = spec.with_color(args.color).ensure_valid()
        logger.info(f"Promoted {spec.name} to {promoted.name}")
        self._emit(dump_manifest(promoted), args.output)

    @staticmethod
    def _api_client(config: BlueCanaryConfig, namespace: str):
        from bluecanary.deployment.api_client import DeploymentApiClient

        return DeploymentApiClient.from_kubeconfig(
            kubeconfig_path=config.kube.kubeconfig_path, namespace=namespace, qps=config.kube.qps
        )

    async def _apply(self, args: argparse.Namespace, config: BlueCanaryConfig):
        document = read_document(args.file)
        spec: DeploymentSpec = DeploymentSpec.from_manifest(document).ensure_valid()
        api_client = self._api_client(config, spec.namespace)
        await api_client.apply_deployment(document)
        print(f"deployment {spec.namespace}/{spec.name} applied")

    async def _switch(self, args: argparse.Namespace, config: BlueCanaryConfig):
        api_client = self._api_client(config, args.namespace or config.kube.namespace)
        await api_client.switch_service(args.service, args.color)
        print(f"service {args.service} now routes to {DeploymentConstants.deployment_name(args.color)}")

    @staticmethod
    async def add_parser_to(subparsers: argparse._SubParsersAction):
        manifest_parser = subparsers.add_parser("manifest", help="Deployment manifest operations")
        manifest_subparsers = manifest_parser.add_subparsers(dest="manifest_action", help="Manifest actions")

        # manifest render
        render_parser = manifest_subparsers.add_parser("render", help="Render a Deployment from a config template")
        render_parser.add_argument("--template", default="fastapi-app", help="template name from the config file")
        render_parser.add_argument("--color", default=DeploymentConstants.COLOR_BLUE, help="color slice to render")
        render_parser.add_argument("--namespace", help="namespace (default: kube.namespace from config)")
        render_parser.add_argument("--image", help="full image reference, overrides <repository>:<color>")
        render_parser.add_argument("--replicas", type=int, help="replica count")
        render_parser.add_argument("--cpus", help="cpu quantity for requests and limits, e.g. 50m")
        render_parser.add_argument("--memory", help="memory quantity for requests and limits, e.g. 128Mi")
        render_parser.add_argument("-o", "--output", help="write to file instead of stdout")

        # manifest validate
        validate_parser = manifest_subparsers.add_parser("validate", help="Check a Deployment manifest")
        validate_parser.add_argument("file", help="path to the manifest")

        # manifest promote
        promote_parser = manifest_subparsers.add_parser("promote", help="Re-target a manifest at another color")
        promote_parser.add_argument("file", help="path to the manifest")
        promote_parser.add_argument("--color", default=DeploymentConstants.COLOR_GREEN, help="target color")
        promote_parser.add_argument("-o", "--output", help="write to file instead of stdout")

        # manifest apply
        apply_parser = manifest_subparsers.add_parser("apply", help="Create or replace the Deployment in the cluster")
        apply_parser.add_argument("file", help="path to the manifest")

        # manifest switch
        switch_parser = manifest_subparsers.add_parser("switch", help="Point a Service at a color slice")
        switch_parser.add_argument("--service", required=True, help="Service name")
        switch_parser.add_argument("--color", required=True, help="color to route traffic to")
        switch_parser.add_argument("--namespace", help="namespace (default: kube.namespace from config)")
