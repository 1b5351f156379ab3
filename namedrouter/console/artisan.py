"""
Command line entry point

Usage:
    namedrouter route:list myapp.routes:router
"""
import argparse
import asyncio
import sys
from typing import Dict, List, Optional, Type

from namedrouter.console.command import Command
from namedrouter.console.commands.route_list_command import RouteListCommand


class Artisan:
    COMMANDS: List[Type[Command]] = [
        RouteListCommand,
    ]

    def __init__(self):
        self.commands: Dict[str, Command] = {cls.name: cls() for cls in self.COMMANDS}

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='namedrouter', description="Named route tools")
        subparsers = parser.add_subparsers(dest='command', metavar='command')
        subparsers.required = True

        for name, command in self.commands.items():
            command.configure(subparsers.add_parser(name, help=command.description))

        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Parse arguments and run the selected command"""
        arguments = vars(self.build_parser().parse_args(argv))
        command = self.commands[arguments.pop('command')]
        return asyncio.run(command.handle(**arguments))


def main(argv: Optional[List[str]] = None):
    sys.exit(Artisan().run(argv))


if __name__ == '__main__':
    main()
