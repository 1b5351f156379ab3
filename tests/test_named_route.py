"""Tests for namedrouter.routing.named_route: path building from named routes."""

import pytest

from namedrouter.exceptions import NoRouteDefined, RouteParameterNotSet, UnknownRouteParameter
from namedrouter.routing.named_route import NamedRoute
from namedrouter.routing.router import NamedRouter


class TestPath:
    @pytest.mark.parametrize(
        ("name", "params", "expected"),
        [
            ("root", {}, "/"),
            ("index", {}, "/index"),
            ("about", {}, "/about/us"),
            ("user", {"id": "3"}, "/user/3"),
            ("user-item", {"id": "3", "item": "book"}, "/user/3/item/book"),
            ("item-splat", {"splat": "records/7"}, "/item/records/7"),
        ],
    )
    def test_renders_path(self, router: NamedRouter, name: str, params: dict, expected: str) -> None:
        route = router.reverse(name)
        for key, value in params.items():
            route = route.with_parameter(key, value)
        assert route.path() == expected

    def test_no_route_defined(self, router: NamedRouter) -> None:
        with pytest.raises(NoRouteDefined) as exc_info:
            router.reverse("unknown").path()
        assert exc_info.value.name == "unknown"
        assert exc_info.value == NoRouteDefined("unknown")

    def test_parameter_not_set(self, router: NamedRouter) -> None:
        with pytest.raises(RouteParameterNotSet) as exc_info:
            router.reverse("user").path()
        assert exc_info.value.parameter == "id"

    def test_unused_parameter(self, router: NamedRouter) -> None:
        route = router.reverse("user").with_parameter("id", "3").with_parameter("item", "3")
        with pytest.raises(UnknownRouteParameter) as exc_info:
            route.path()
        assert exc_info.value == UnknownRouteParameter("item")

    def test_missing_parameter_reported_in_template_order(self, router: NamedRouter) -> None:
        with pytest.raises(RouteParameterNotSet) as exc_info:
            router.reverse("user-item").with_parameter("item", "book").path()
        assert exc_info.value.parameter == "id"

    def test_missing_parameter_checked_before_unused(self, router: NamedRouter) -> None:
        route = router.reverse("user-item").with_parameter("id", "3").with_parameter("extra", "x")
        with pytest.raises(RouteParameterNotSet) as exc_info:
            route.path()
        assert exc_info.value.parameter == "item"

    def test_first_unused_parameter_reported(self, router: NamedRouter) -> None:
        route = router.reverse("root").with_parameter("b", "1").with_parameter("a", "2")
        with pytest.raises(UnknownRouteParameter) as exc_info:
            route.path()
        assert exc_info.value.parameter == "b"

    def test_parameters_on_placeholder_free_route(self, router: NamedRouter) -> None:
        with pytest.raises(UnknownRouteParameter):
            router.reverse("about").with_parameter("id", "1").path()


class TestTemplateShapes:
    def _path(self, template: str, **params: str) -> str:
        return NamedRoute("test", template).with_parameters(params).path()

    def test_missing_leading_slash(self) -> None:
        assert self._path("about/us") == "/about/us"

    def test_trailing_slash_kept(self) -> None:
        assert self._path("/users/") == "/users/"

    def test_duplicate_slashes_collapse(self) -> None:
        assert self._path("//a//b") == "/a/b"

    def test_values_are_verbatim(self) -> None:
        assert self._path("/search/:q", q="a b?c") == "/search/a b?c"

    def test_wildcard_keeps_separators(self) -> None:
        assert self._path("/files/*path", path="docs/api/index.html") == "/files/docs/api/index.html"

    def test_repeated_placeholder_is_consumed_once(self) -> None:
        with pytest.raises(RouteParameterNotSet) as exc_info:
            self._path("/a/:id/b/:id", id="1")
        assert exc_info.value.parameter == "id"


class TestImmutability:
    def test_with_parameter_returns_new_handle(self, router: NamedRouter) -> None:
        base = router.reverse("user")
        bound = base.with_parameter("id", "3")

        assert base.parameters == {}
        assert bound.parameters == {"id": "3"}
        assert bound is not base

    def test_branches_do_not_share_bindings(self, router: NamedRouter) -> None:
        base = router.reverse("user")
        first = base.with_parameter("id", "1")
        second = base.with_parameter("id", "2")

        assert first.path() == "/user/1"
        assert second.path() == "/user/2"

    def test_render_is_repeatable(self, router: NamedRouter) -> None:
        route = router.reverse("user-item").with_parameters(id="3", item="book")

        assert route.path() == route.path() == "/user/3/item/book"
        assert dict(route.parameters) == {"id": "3", "item": "book"}

    def test_failed_render_is_repeatable(self, router: NamedRouter) -> None:
        route = router.reverse("user").with_parameters(id="3", extra="x")

        for _ in range(2):
            with pytest.raises(UnknownRouteParameter):
                route.path()

    def test_last_write_wins(self, router: NamedRouter) -> None:
        route = router.reverse("user").with_parameter("id", "1").with_parameter("id", "2")
        assert route.path() == "/user/2"

    def test_parameters_are_read_only(self, router: NamedRouter) -> None:
        route = router.reverse("user").with_parameter("id", "1")
        with pytest.raises(TypeError):
            route.parameters["id"] = "2"  # type: ignore[index]

    def test_values_converted_to_str(self, router: NamedRouter) -> None:
        assert router.reverse("user").with_parameter("id", 42).path() == "/user/42"

    def test_with_parameters_merges_mapping_and_kwargs(self, router: NamedRouter) -> None:
        route = router.reverse("user-item").with_parameters({"id": 3}, item="book")
        assert route.path() == "/user/3/item/book"


class TestReverse:
    def test_reverse_never_fails(self, router: NamedRouter) -> None:
        route = router.reverse("missing")
        assert route.name == "missing"
        assert route.route == ""

    def test_reverse_snapshots_template(self, router: NamedRouter) -> None:
        route = router.reverse("user")
        router.get("user", "/people/:id", lambda request: None)

        assert route.with_parameter("id", "1").path() == "/user/1"
        assert router.reverse("user").with_parameter("id", "1").path() == "/people/1"

    def test_handles_are_hashable(self, router: NamedRouter) -> None:
        first = router.reverse("user").with_parameter("id", "1")
        same = router.reverse("user").with_parameter("id", 1)
        other = router.reverse("user").with_parameter("id", "2")

        assert hash(first) == hash(same)
        assert len({first, same, other}) == 2
