import argparse

from bluecanary.cli.command.command import Command as CliCommand
from bluecanary.logger import init_logger
from bluecanary.service.model import SentimentModel

logger = init_logger("bluecanary.cli.model")


class ModelCommand(CliCommand):
    name = "model"

    async def arun(self, args: argparse.Namespace):
        if args.model_action != "train":
            raise ValueError("Model action is required (train)")

        model = SentimentModel.default()
        path = model.save(args.output)
        print(f"model with classes {model.classes} saved to {path}")

    @staticmethod
    async def add_parser_to(subparsers: argparse._SubParsersAction):
        model_parser = subparsers.add_parser("model", help="Sentiment model operations")
        model_subparsers = model_parser.add_subparsers(dest="model_action", help="Model actions")

        # model train
        train_parser = model_subparsers.add_parser("train", help="Fit the bundled model and save it with joblib")
        train_parser.add_argument("--output", default="model/sentiment.joblib", help="artifact path")
