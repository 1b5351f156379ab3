"""
Console Package
Command line tools for inspecting named routes
"""
from namedrouter.console.artisan import Artisan, main
from namedrouter.console.command import Command

__all__ = [
    'Artisan',
    'Command',
    'main',
]
