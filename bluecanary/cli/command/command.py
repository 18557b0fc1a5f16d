import argparse
from abc import ABC, abstractmethod


class Command(ABC):
    name: str = ""

    @abstractmethod
    async def arun(self, args: argparse.Namespace):
        """Execute the command with parsed arguments."""

    @staticmethod
    @abstractmethod
    async def add_parser_to(subparsers: argparse._SubParsersAction):
        """Register the command's parser on the top-level subparsers."""
