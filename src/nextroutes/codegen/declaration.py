"""Declaration generator — render routes as a TypeScript declaration file.

The output declares a ``Routes`` union of every legal navigation target and
augments ``next/link`` and ``next/router`` so that ``<Link href>``,
``router.push`` and ``router.replace`` only accept known routes with the
query parameters their dynamic segments require::

    type Routes =
      | { pathname: '/' }
      | '/'
      | { pathname: '/posts/[id]', query: { id: string; } }

Rendering is deterministic: the same routes always produce the same text.
"""

from collections.abc import Mapping, Sequence
from typing import assert_never

from nextroutes._types import ParamName
from nextroutes.routes.extractor import ParamKind, Route

UNION_NAME = "Routes"

_HEADER = """\
// THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.
// Run `nextroutes generate` to regenerate this file.
"""

_LINK_MODULE = """\
declare module "next/link" {
  import type { LinkProps as NextLinkProps } from "next/link";
  import type { PropsWithChildren, MouseEventHandler } from "react";

  interface LinkProps extends Omit<NextLinkProps, "href"> {
    href: %(union)s;
  }

  declare function Link(
    props: PropsWithChildren<LinkProps>
  ): DetailedReactHTMLElement<
    {
      onMouseEnter?: MouseEventHandler<Element> | undefined;
      onClick: MouseEventHandler;
      href?: string | undefined;
      ref?: any;
    },
    HTMLElement
  >;

  export default Link;
}
"""

_ROUTER_MODULE = """\
declare module "next/router" {
  import type { NextRouter } from "next/router";

  type TransitionOptions = Parameters<NextRouter["push"]>[2];

  interface Router extends Omit<NextRouter, "push" | "replace"> {
    push(
      url: %(union)s,
      as?: %(union)s,
      options?: TransitionOptions
    ): Promise<boolean>;
    replace(
      url: %(union)s,
      as?: %(union)s,
      options?: TransitionOptions
    ): Promise<boolean>;
  }

  export function useRouter(): Router;
}
"""

_UNION_SEPARATOR = "\n  | "


def render_field(name: ParamName, kind: ParamKind) -> str:
    """Render one query field, e.g. ``id: string`` or ``slug?: string[]``."""
    match kind:
        case ParamKind.DYNAMIC:
            return f"{name}: string"
        case ParamKind.CATCH_ALL:
            return f"{name}: string[]"
        case ParamKind.OPTIONAL_CATCH_ALL:
            return f"{name}?: string[]"
        case _:
            assert_never(kind)


def render_query(query: Mapping[ParamName, ParamKind]) -> str:
    """Render a query map as an object type, or ``""`` when it is empty.

    ``{"id": DYNAMIC, "rest": CATCH_ALL}`` -> ``{ id: string; rest: string[]; }``

    """
    fields = "".join(f"{render_field(name, kind)}; " for name, kind in query.items())
    if not fields:
        return ""
    return f"{{ {fields}}}"


def render_route(route: Route) -> list[str]:
    """Render the union alternatives contributed by *route*.

    Routes without parameters may also be referenced as a bare string, so
    they contribute two alternatives.

    """
    query = render_query(route.query)
    if query:
        return [f"{{ pathname: '{route.pathname}', query: {query} }}"]
    return [f"{{ pathname: '{route.pathname}' }}", f"'{route.pathname}'"]


def render_union(routes: Sequence[Route]) -> str:
    """Render the ``type Routes = ...`` declaration in route order."""
    alternatives = [alt for route in routes for alt in render_route(route)]
    if not alternatives:
        return f"type {UNION_NAME} = never;\n"
    return f"type {UNION_NAME} ={_UNION_SEPARATOR}" + _UNION_SEPARATOR.join(alternatives) + "\n"


def generate(routes: Sequence[Route]) -> str:
    """Render the complete declaration file for *routes*."""
    params = {"union": UNION_NAME}
    return "\n".join([
        _HEADER,
        render_union(routes),
        _LINK_MODULE % params,
        _ROUTER_MODULE % params,
    ])
