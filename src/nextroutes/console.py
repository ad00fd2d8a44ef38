"""Console output — status lines on stderr.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback to plain text.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nextroutes.app import GenerateResult
    from nextroutes.routes.extractor import Route


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_summary(result: GenerateResult, *, check: bool = False) -> None:
    """Print a one-line generation summary to stderr.

    Args:
        result: Outcome of ``generate()`` or ``check()``.
        check: Whether the run only compared against the file on disk.

    """
    routes_label = "route" if result.route_count == 1 else "routes"
    count = f"{result.route_count} {routes_label}"
    timing = f" {_DIM}in {result.duration_ms:.0f}ms{_RESET}"

    if check and result.changed:
        status = f"{_YELLOW}!{_RESET} {result.output_path} is out of date ({count})"
    elif check:
        status = f"{_GREEN}✓{_RESET} {result.output_path} is up to date ({count})"
    elif result.changed:
        status = f"{_GREEN}✓{_RESET} Wrote {_BOLD}{count}{_RESET} to {result.output_path}"
    else:
        status = f"{_DIM}-{_RESET} {result.output_path} unchanged ({count})"

    print(f"  {status}{timing}", file=sys.stderr)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"{_RED}error:{_RESET} {message}", file=sys.stderr)


def format_route(route: Route) -> str:
    """Format a route as ``pathname  name:kind ...`` for listings."""
    params = " ".join(f"{name}:{kind}" for name, kind in route.query.items())
    if not params:
        return route.pathname
    return f"{route.pathname}  {params}"
