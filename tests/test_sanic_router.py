"""Tests for namedrouter.routing.sanic_router: registering named routes with Sanic."""

import asyncio

import pytest
from sanic import response

from namedrouter.exceptions import RouteDefinitionException
from namedrouter.routing.router import NamedRouter
from namedrouter.routing.sanic_router import SanicRouter, compile_uri, wrap_handler


async def show_user(request, id):
    return response.text(f"user {id}")


async def show_item(request, splat):
    return response.text(splat)


async def home(request):
    return response.text("home")


async def submit(request):
    return response.text("submitted")


def deny(request):
    return response.text("denied", status=403)


def allow(request):
    return None


class TestCompileUri:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", "/"),
            ("/about/us", "/about/us"),
            ("/user/:id", "/user/<id>"),
            ("/user/:id/item/:item", "/user/<id>/item/<item>"),
            ("/item/*splat", "/item/<splat:path>"),
            ("/users/", "/users/"),
        ],
    )
    def test_compile(self, path: str, expected: str) -> None:
        assert compile_uri(path) == expected


class TestWrapHandler:
    def test_no_middleware_returns_handler(self) -> None:
        assert wrap_handler(home, ()) is home

    def test_middleware_short_circuits(self) -> None:
        calls = []

        def record(request):
            calls.append(request)

        async def endpoint(request):
            return "endpoint"

        wrapped = wrap_handler(endpoint, (record, lambda request: "stopped"))

        assert asyncio.run(wrapped("req")) == "stopped"
        assert calls == ["req"]

    def test_async_middleware_and_sync_handler(self) -> None:
        async def passthrough(request):
            return None

        def endpoint(request, id):
            return f"sync {id}"

        wrapped = wrap_handler(endpoint, (passthrough,))

        assert asyncio.run(wrapped("req", id="3")) == "sync 3"
        assert wrapped.__name__ == "endpoint"


class TestSanicRouter:
    def test_requires_handler(self, sanic_app) -> None:
        with pytest.raises(RouteDefinitionException):
            SanicRouter(sanic_app).get("/nothing")

    def test_group_accumulates_prefix_and_middleware(self, sanic_app) -> None:
        group = SanicRouter(sanic_app).group("/api", allow).group("v1", deny)

        assert group.prefix == "/api/v1"
        assert group.middleware == (allow, deny)

    def test_route_names_are_unique(self, sanic_app) -> None:
        adapter = SanicRouter(sanic_app)

        assert adapter._unique_name("GET", "/a_b") == "get_a_b"
        assert adapter._unique_name("GET", "/a/b") == "get_a_b_2"
        assert adapter.group("/x")._unique_name("GET", "/a-b") == "get_a_b_3"

    def test_adapters_on_one_target_share_names(self, sanic_app) -> None:
        first = SanicRouter(sanic_app)
        second = SanicRouter(sanic_app)

        assert first._unique_name("GET", "/a-b") == "get_a_b"
        assert second._unique_name("GET", "/a_b") == "get_a_b_2"
        assert first.route_names is second.route_names

    def test_missing_handler_leaves_no_name(self, sanic_app) -> None:
        router = NamedRouter(SanicRouter(sanic_app))

        with pytest.raises(RouteDefinitionException):
            router.get("nohandler", "/nohandler")
        assert not router.has("nohandler")


class TestSanicIntegration:
    def _router(self, sanic_app) -> NamedRouter:
        router = NamedRouter(SanicRouter(sanic_app))
        router.get("root", "/", home)
        router.get("user", "/user/:id", show_user)
        router.get("item-splat", "/item/*splat", show_item)
        router.group("/api").group("v1").post("v1-submit", "/submit", submit)
        router.group("/admin", deny).get("admin-home", "/dashboard", home)
        router.group("/public", allow).get("public-home", "/home", home)
        return router

    @pytest.mark.parametrize(
        ("name", "params", "expected"),
        [
            ("root", {}, "home"),
            ("user", {"id": 3}, "user 3"),
            ("item-splat", {"splat": "records/7"}, "records/7"),
            ("public-home", {}, "home"),
        ],
    )
    def test_reversed_path_is_served(self, sanic_app, name: str, params: dict, expected: str) -> None:
        router = self._router(sanic_app)

        _, resp = sanic_app.test_client.get(router.route(name, params))

        assert resp.status == 200
        assert resp.text == expected

    def test_grouped_post_is_served(self, sanic_app) -> None:
        router = self._router(sanic_app)
        path = router.reverse("v1-submit").path()
        assert path == "/api/v1/submit"

        _, resp = sanic_app.test_client.post(path)

        assert resp.status == 200
        assert resp.text == "submitted"

    def test_group_handlers_run_first(self, sanic_app) -> None:
        router = self._router(sanic_app)

        _, resp = sanic_app.test_client.get(router.route("admin-home"))

        assert resp.status == 403
        assert resp.text == "denied"

    def test_two_routers_on_one_app(self, sanic_app) -> None:
        dashed = NamedRouter(SanicRouter(sanic_app))
        underscored = NamedRouter(SanicRouter(sanic_app))
        dashed.get("dashed", "/a-b", home)
        underscored.get("underscored", "/a_b", submit)

        _, resp = sanic_app.test_client.get(underscored.route("underscored"))

        assert resp.status == 200
        assert resp.text == "submitted"
