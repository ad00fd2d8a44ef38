"""TypeScript declaration generation for discovered routes.

Public API::

    from nextroutes.codegen import generate

    text = generate(routes)
"""

from nextroutes.codegen.declaration import (
    UNION_NAME,
    generate,
    render_query,
    render_route,
)

__all__ = [
    "UNION_NAME",
    "generate",
    "render_query",
    "render_route",
]
