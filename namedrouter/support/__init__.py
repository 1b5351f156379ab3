"""
Support Classes
"""

from namedrouter.support.config import Config

__all__ = [
    'Config',
]
