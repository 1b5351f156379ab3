"""Shared fixtures: a recording router adapter, config isolation, Sanic apps."""

import uuid
from typing import Optional

import pytest

from namedrouter.routing.adapter import RouterAdapter
from namedrouter.routing.router import NamedRouter
from namedrouter.support import Config


class RecordingRouter(RouterAdapter):
    """Adapter double that records every registration it receives."""

    def __init__(self, prefix: str = "", handlers: tuple = (), calls: Optional[list] = None) -> None:
        self.prefix = prefix
        self.handlers = handlers
        self.calls = calls if calls is not None else []

    def add_route(self, method, path, *handlers):
        self.calls.append((self.prefix, method, path, handlers))

    def group(self, prefix, *handlers):
        return RecordingRouter(self.prefix + prefix, self.handlers + handlers, self.calls)


def noop(request=None):
    return None


ROUTES = [
    ("root", "/"),
    ("index", "/index"),
    ("about", "/about/us"),
    ("user", "/user/:id"),
    ("user-item", "/user/:id/item/:item"),
    ("item-splat", "/item/*splat"),
]


@pytest.fixture(autouse=True)
def _isolate_config():
    Config.clear_runtime_overrides()
    yield
    Config.clear_runtime_overrides()


@pytest.fixture
def engine() -> RecordingRouter:
    return RecordingRouter()


@pytest.fixture
def router(engine: RecordingRouter) -> NamedRouter:
    named = NamedRouter(engine)
    for name, uri in ROUTES:
        named.get(name, uri, noop)
    return named


@pytest.fixture
def sanic_app():
    from sanic import Sanic

    return Sanic(f"NamedRouterTest{uuid.uuid4().hex}")
