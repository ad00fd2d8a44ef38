"""nextroutes — type-safe route declarations for Next.js pages.

Scans a ``pages/`` directory and writes a TypeScript declaration file that
constrains ``next/link`` and ``next/router`` to the routes that exist.

Quick start::

    import nextroutes

    nextroutes.generate("my-app/")    # writes my-app/nextjs-routes.d.ts
    nextroutes.check("my-app/")       # reports whether the file is stale

Building blocks::

    from nextroutes.routes import extract_routes
    from nextroutes.codegen import generate

"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ParamKind",
    "Route",
    "RoutesConfig",
    "__version__",
    "check",
    "extract_routes",
    "generate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nextroutes`` fast while providing a clean top-level API.
    """
    if name == "RoutesConfig":
        from nextroutes.config import RoutesConfig

        return RoutesConfig

    if name in ("ParamKind", "Route", "extract_routes"):
        from nextroutes.routes import extractor

        return getattr(extractor, name)

    if name == "generate":
        from nextroutes.app import generate

        return generate

    if name == "check":
        from nextroutes.app import check

        return check

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
