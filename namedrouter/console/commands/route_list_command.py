"""
Route List Command
Display all named routes in a table
"""
import argparse
import importlib

from namedrouter import defaults
from namedrouter.console.command import Command
from namedrouter.routing.router import NamedRouter
from namedrouter.support import Config


def load_router(target: str) -> NamedRouter:
    """
    Import a router from a 'module:attribute' reference

    The attribute may be a NamedRouter or a zero-argument factory
    returning one (e.g. create_app).

    Raises:
        ImportError: The module cannot be imported
        AttributeError: The attribute does not exist
        TypeError: The attribute is not a NamedRouter
    """
    module_name, _, attribute = target.partition(':')
    if not attribute:
        raise ImportError(f"Expected 'module:attribute', got '{target}'")

    module = importlib.import_module(module_name)
    router = getattr(module, attribute)

    if not isinstance(router, NamedRouter) and callable(router):
        router = router()

    if not isinstance(router, NamedRouter):
        raise TypeError(f"'{target}' is not a NamedRouter")

    return router


class RouteListCommand(Command):
    """List all named routes"""

    name = "route:list"
    description = "List all named routes"

    def configure(self, parser: argparse.ArgumentParser):
        parser.add_argument('router', help="Router to inspect, as 'module:attribute'")

    async def handle(self, router: str = '', **kwargs) -> int:
        """List all routes"""
        try:
            named_router = load_router(router)
        except (ImportError, AttributeError, TypeError) as e:
            self.error(f"Unable to load router '{router}': {e}")
            return 1

        routes = named_router.registry.to_dict()

        if not routes:
            self.error("No named routes registered")
            return 1

        rows = [
            [info['uri'], name, ', '.join(info['parameters']) or '-']
            for name, info in sorted(routes.items(), key=lambda item: (item[1]['uri'], item[0]))
        ]

        self.table(
            ['URI', 'Name', 'Parameters'],
            rows,
            max_widths=[
                Config.get('console.MAX_URI_WIDTH', defaults.DEFAULT_MAX_URI_WIDTH),
                Config.get('console.MAX_NAME_WIDTH', defaults.DEFAULT_MAX_NAME_WIDTH),
                defaults.DEFAULT_MAX_PARAMETERS_WIDTH,
            ],
        )
        self.line()
        self.success(f"Showing {len(rows)} routes")
        return 0
