"""Route extractor — turn page file paths into route records.

File-path convention (Next.js ``pages/``)::

    pages/index.tsx               -> /
    pages/about.tsx               -> /about
    pages/posts/index.tsx         -> /posts/
    pages/posts/[id].tsx          -> /posts/[id]            id: dynamic
    pages/docs/[...slug].tsx      -> /docs/[...slug]        slug: catch-all
    pages/shop/[[...slug]].tsx    -> /shop/[[...slug]]      slug: optional-catch-all
    pages/_app.tsx                -> (not routable)

Extraction is a pure function of its input: no I/O, no exceptions.
"""

import posixpath
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from nextroutes._types import ParamName, RawFilePath, RoutePath

# Shortest bracketed segment, matched left to right without overlap
_DYNAMIC_SEGMENT_RE = re.compile(r"\[(.*?)\]")

_CATCH_ALL_MARKER = "..."

# Suffix that maps an index file onto its directory
_INDEX_SUFFIX = "index"


class ParamKind(StrEnum):
    """How a dynamic URL segment binds to its query parameter."""

    DYNAMIC = "dynamic"
    CATCH_ALL = "catch-all"
    OPTIONAL_CATCH_ALL = "optional-catch-all"


@dataclass(frozen=True, slots=True)
class Route:
    """A routable page.

    Attributes:
        pathname: Normalized route path (e.g., ``/posts/[id]``).
        query: Parameter name to kind, in the order the segments appear in
            the filename.  Read-only.

    """

    pathname: RoutePath
    query: Mapping[ParamName, ParamKind]


def extract_routes(
    files: Iterable[RawFilePath],
    *,
    pages_dir: str = "pages",
    non_routable_prefix: str = "_",
) -> list[Route]:
    """Convert page file paths into routes, preserving input order.

    Files whose name (extension removed) starts with *non_routable_prefix*
    are skipped.  Only the file name is checked: a routable file inside a
    ``_private/`` directory still produces a route.

    """
    routes: list[Route] = []
    for file in files:
        filename = _strip_extension(file.replace(pages_dir, "", 1))
        if posixpath.basename(filename).startswith(non_routable_prefix):
            continue
        routes.append(Route(
            pathname=_strip_index(filename),
            query=MappingProxyType(_extract_query(filename)),
        ))
    return routes


def _strip_extension(filename: str) -> str:
    """Remove the extension of the final path component.

    ``/posts/[id].tsx`` -> ``/posts/[id]``
    ``/v1.2/about``     -> ``/v1.2/about``

    """
    _root, ext = posixpath.splitext(filename)
    return filename.removesuffix(ext) if ext else filename


def _strip_index(filename: str) -> RoutePath:
    """``/index`` -> ``/``, ``/posts/index`` -> ``/posts/``."""
    return filename.removesuffix(_INDEX_SUFFIX)


def _extract_query(filename: str) -> dict[ParamName, ParamKind]:
    """Collect bracketed segments of *filename*; a repeated name keeps the last kind."""
    query: dict[ParamName, ParamKind] = {}
    for match in _DYNAMIC_SEGMENT_RE.finditer(filename):
        segment = match.group(0)
        param = segment.replace("[", "").replace("]", "").replace(_CATCH_ALL_MARKER, "", 1)
        query[param] = _classify(segment)
    return query


def _classify(segment: str) -> ParamKind:
    if segment.startswith("[["):
        return ParamKind.OPTIONAL_CATCH_ALL
    if segment.startswith("[" + _CATCH_ALL_MARKER):
        return ParamKind.CATCH_ALL
    return ParamKind.DYNAMIC
