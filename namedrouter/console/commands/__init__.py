"""
Built-in Commands
"""
from namedrouter.console.commands.route_list_command import RouteListCommand, load_router

__all__ = [
    'RouteListCommand',
    'load_router',
]
