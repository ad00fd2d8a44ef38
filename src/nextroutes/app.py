"""nextroutes application — the pages-to-declaration pipeline.

Locates the pages directory, walks it, extracts routes, renders the
declaration and writes it.  The two public functions (generate, check) are
the primary entry points.
"""

import time
from dataclasses import dataclass
from pathlib import Path, PurePath

from nextroutes._errors import ConfigError, GenerateError
from nextroutes.codegen.declaration import generate as render_declaration
from nextroutes.config import RoutesConfig
from nextroutes.config_loader import load_config
from nextroutes.routes.extractor import Route, extract_routes
from nextroutes.routes.walker import find_files


@dataclass(frozen=True, slots=True)
class GenerateResult:
    """Outcome of a declaration run.

    Attributes:
        output_path: Declaration file that was written (or checked).
        route_count: Number of routes in the declaration.
        changed: True if the file was written, or for ``check()``, if the
            file on disk differs from the rendered declaration.
        duration_ms: Time spent in milliseconds.

    """

    output_path: Path
    route_count: int
    changed: bool
    duration_ms: float


def find_pages_dir(config: RoutesConfig) -> Path:
    """Return the first existing pages directory (``pages/``, then ``src/pages/``).

    Raises:
        ConfigError: If no candidate directory exists.

    """
    for candidate in config.pages_candidates:
        if candidate.is_dir():
            return candidate
    searched = ", ".join(str(p) for p in config.pages_candidates)
    msg = f"No '{config.pages_dir}' directory found (searched {searched})"
    raise ConfigError(msg)


def collect_routes(config: RoutesConfig) -> list[Route]:
    """Walk the pages directory and extract its routes in walk order.

    Paths are made relative to the pages directory's parent so that every
    path starts with the pages directory name (``pages/posts/[id].tsx``).

    Raises:
        ConfigError: If the pages directory is missing.
        GenerateError: If the pages directory cannot be read.

    """
    pages = find_pages_dir(config)
    try:
        files = find_files(pages, ignore=config.ignore)
    except OSError as exc:
        msg = f"Failed to read pages directory {pages}: {exc}"
        raise GenerateError(msg) from exc

    relative = [PurePath(f).relative_to(pages.parent).as_posix() for f in files]
    return extract_routes(
        relative,
        pages_dir=config.pages_dir,
        non_routable_prefix=config.non_routable_prefix,
    )


def _read_existing(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Failed to read {path}: {exc}"
        raise GenerateError(msg) from exc


def generate(root: str | Path = ".", **kwargs: object) -> GenerateResult:
    """Write the route declaration file for the project at *root*.

    An existing file whose content already matches is left untouched.

    Args:
        root: Path to the project root directory.
        **kwargs: Override RoutesConfig fields.

    Raises:
        ConfigError: On invalid configuration or a missing pages directory.
        GenerateError: If the declaration file cannot be written.

    """
    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    routes = collect_routes(config)
    text = render_declaration(routes)

    output = config.output_path
    changed = _read_existing(output) != text
    if changed:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text, encoding="utf-8")
        except OSError as exc:
            msg = f"Failed to write {output}: {exc}"
            raise GenerateError(msg) from exc

    return GenerateResult(
        output_path=output,
        route_count=len(routes),
        changed=changed,
        duration_ms=(time.perf_counter() - t0) * 1000,
    )


def check(root: str | Path = ".", **kwargs: object) -> GenerateResult:
    """Compare the declaration file on disk against a fresh render.

    Nothing is written; ``changed`` is True when the file is missing or stale.

    """
    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    routes = collect_routes(config)
    text = render_declaration(routes)

    return GenerateResult(
        output_path=config.output_path,
        route_count=len(routes),
        changed=_read_existing(config.output_path) != text,
        duration_ms=(time.perf_counter() - t0) * 1000,
    )


def list_routes(root: str | Path = ".", **kwargs: object) -> list[Route]:
    """Return the routes of the project at *root* without rendering them."""
    config = load_config(Path(root), **kwargs)
    return collect_routes(config)
