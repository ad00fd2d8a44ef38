"""Tests for nextroutes.codegen.declaration — TypeScript declaration rendering."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from nextroutes.codegen.declaration import (
    UNION_NAME,
    generate,
    render_field,
    render_query,
    render_route,
    render_union,
)
from nextroutes.routes.extractor import ParamKind, Route, extract_routes


def _route(pathname: str, **query: ParamKind) -> Route:
    return Route(pathname=pathname, query=MappingProxyType(query))


# ---------------------------------------------------------------------------
# render_field / render_query
# ---------------------------------------------------------------------------


class TestRenderQuery:
    """Query object-type fragments."""

    def test_empty(self) -> None:
        assert render_query({}) == ""

    def test_dynamic(self) -> None:
        assert render_query({"id": ParamKind.DYNAMIC}) == "{ id: string; }"

    def test_catch_all(self) -> None:
        assert render_query({"slug": ParamKind.CATCH_ALL}) == "{ slug: string[]; }"

    def test_optional_catch_all(self) -> None:
        assert render_query({"slug": ParamKind.OPTIONAL_CATCH_ALL}) == "{ slug?: string[]; }"

    def test_fields_in_map_order(self) -> None:
        query = {"org": ParamKind.DYNAMIC, "path": ParamKind.CATCH_ALL}
        assert render_query(query) == "{ org: string; path: string[]; }"

    @pytest.mark.parametrize("kind", list(ParamKind))
    def test_every_kind_renders(self, kind: ParamKind) -> None:
        # Adding a ParamKind member without a render rule fails here.
        assert render_field("p", kind).startswith("p")


# ---------------------------------------------------------------------------
# render_route / render_union
# ---------------------------------------------------------------------------


class TestRenderRoute:
    """Union alternatives per route."""

    def test_static_route_has_string_alternative(self) -> None:
        assert render_route(_route("/about")) == ["{ pathname: '/about' }", "'/about'"]

    def test_dynamic_route_is_object_only(self) -> None:
        route = _route("/posts/[id]", id=ParamKind.DYNAMIC)
        assert render_route(route) == [
            "{ pathname: '/posts/[id]', query: { id: string; } }",
        ]

    def test_union_layout(self) -> None:
        routes = [_route("/"), _route("/posts/[id]", id=ParamKind.DYNAMIC)]
        assert render_union(routes) == (
            "type Routes =\n"
            "  | { pathname: '/' }\n"
            "  | '/'\n"
            "  | { pathname: '/posts/[id]', query: { id: string; } }\n"
        )

    def test_empty_union_is_never(self) -> None:
        assert render_union([]) == "type Routes = never;\n"


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    """Complete declaration text."""

    def test_header(self) -> None:
        text = generate([_route("/")])
        assert text.startswith("// THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.\n")

    def test_augments_link_and_router(self) -> None:
        text = generate([_route("/")])
        assert 'declare module "next/link" {' in text
        assert f"    href: {UNION_NAME};" in text
        assert 'declare module "next/router" {' in text
        assert f"      url: {UNION_NAME},\n      as?: {UNION_NAME}," in text
        assert "  export function useRouter(): Router;\n}\n" in text

    def test_no_template_placeholders_left(self) -> None:
        assert "%(" not in generate([])

    def test_idempotent(self) -> None:
        routes = extract_routes(["pages/index.tsx", "pages/[id].tsx"])
        assert generate(routes) == generate(routes)

    def test_order_follows_routes(self) -> None:
        files = ["pages/b.tsx", "pages/a.tsx"]
        forward = generate(extract_routes(files))
        backward = generate(extract_routes(list(reversed(files))))
        assert forward.index("'/b'") < forward.index("'/a'")
        assert backward.index("'/a'") < backward.index("'/b'")

    def test_repeated_param_rendered_once(self) -> None:
        text = generate(extract_routes(["pages/[id]/[id].tsx"]))
        assert "query: { id: string; } }" in text
        assert text.count("id: string") == 1

    def test_full_example(self) -> None:
        routes = extract_routes([
            "pages/index.tsx",
            "pages/_app.tsx",
            "pages/about.tsx",
            "pages/posts/[id].tsx",
            "pages/docs/[...slug].tsx",
            "pages/shop/[[...slug]].tsx",
        ])
        union = generate(routes).split("\n\n")[1]
        assert union == (
            "type Routes =\n"
            "  | { pathname: '/' }\n"
            "  | '/'\n"
            "  | { pathname: '/about' }\n"
            "  | '/about'\n"
            "  | { pathname: '/posts/[id]', query: { id: string; } }\n"
            "  | { pathname: '/docs/[...slug]', query: { slug: string[]; } }\n"
            "  | { pathname: '/shop/[[...slug]]', query: { slug?: string[]; } }"
        )
