"""
HTTP Package
URL generation from named routes
"""
from namedrouter.http.url import UrlGenerator

__all__ = [
    'UrlGenerator',
]
