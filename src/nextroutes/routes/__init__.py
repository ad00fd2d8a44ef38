"""Route discovery for file-system based pages.

Walks a ``pages/`` directory and turns each page file into a route record
with its pathname and typed dynamic-segment parameters.

Public API::

    from nextroutes.routes import extract_routes, find_files

    routes = extract_routes(["pages/index.tsx", "pages/posts/[id].tsx"])
"""

from nextroutes.routes.extractor import ParamKind, Route, extract_routes
from nextroutes.routes.walker import find_files

__all__ = [
    "ParamKind",
    "Route",
    "extract_routes",
    "find_files",
]
