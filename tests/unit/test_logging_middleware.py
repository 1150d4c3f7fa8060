"""
Unit Tests for the HTTP metrics endpoint label.
"""

from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from src.presentation.middleware.logging import _endpoint_label


async def _endpoint(request):
    return PlainTextResponse("ok")


def make_request(path: str, route: Route | None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("test", 80),
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": [],
    }
    if route is not None:
        scope["route"] = route
    return Request(scope)


class TestEndpointLabel:

    def test_full_route_path_is_used_as_is(self):
        route = Route("/api/v1/health", _endpoint)

        assert _endpoint_label(make_request("/api/v1/health", route)) == "/api/v1/health"

    def test_prefix_restored_for_route_without_it(self):
        route = Route("/health", _endpoint)

        assert _endpoint_label(make_request("/api/v1/health", route)) == "/api/v1/health"

    def test_templated_route_keeps_placeholder(self):
        route = Route("/transaction/{transaction_id}", _endpoint)

        label = _endpoint_label(make_request("/api/v1/transaction/42", route))

        assert label == "/api/v1/transaction/{transaction_id}"

    def test_unmatched_request(self):
        assert _endpoint_label(make_request("/nowhere", None)) == "unmatched"
