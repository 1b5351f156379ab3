"""
Router Adapter
Contract for the HTTP router that named routes are layered on
"""
from abc import ABC, abstractmethod
from typing import Any, Callable


class RouterAdapter(ABC):
    """
    Underlying HTTP router as seen by NamedRouter

    Implementations register (method, path, handlers) with a real router
    and form prefix-scoped groups. Handlers are opaque values passed
    through unchanged. Paths use ``:param`` and ``*param`` placeholders.
    """

    @abstractmethod
    def add_route(self, method: str, path: str, *handlers: Callable[..., Any]) -> Any:
        """
        Register handlers for a method and path

        Args:
            method: Upper-case HTTP method
            path: Route path relative to this router or group
            *handlers: Handler chain, passed through as given
        """

    @abstractmethod
    def group(self, prefix: str, *handlers: Callable[..., Any]) -> 'RouterAdapter':
        """
        Create a group that registers routes under a path prefix

        Args:
            prefix: Path prefix relative to this router or group
            *handlers: Handlers applied to every route of the group
        """

    def get(self, path: str, *handlers: Callable[..., Any]) -> Any:
        """Register a GET route"""
        return self.add_route('GET', path, *handlers)

    def post(self, path: str, *handlers: Callable[..., Any]) -> Any:
        """Register a POST route"""
        return self.add_route('POST', path, *handlers)

    def put(self, path: str, *handlers: Callable[..., Any]) -> Any:
        """Register a PUT route"""
        return self.add_route('PUT', path, *handlers)

    def patch(self, path: str, *handlers: Callable[..., Any]) -> Any:
        """Register a PATCH route"""
        return self.add_route('PATCH', path, *handlers)

    def delete(self, path: str, *handlers: Callable[..., Any]) -> Any:
        """Register a DELETE route"""
        return self.add_route('DELETE', path, *handlers)

    def head(self, path: str, *handlers: Callable[..., Any]) -> Any:
        """Register a HEAD route"""
        return self.add_route('HEAD', path, *handlers)

    def options(self, path: str, *handlers: Callable[..., Any]) -> Any:
        """Register an OPTIONS route"""
        return self.add_route('OPTIONS', path, *handlers)
