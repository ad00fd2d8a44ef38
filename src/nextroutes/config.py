"""nextroutes configuration.

RoutesConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Configuration for a route declaration run.

    Attributes:
        root: Path to the project root (contains ``pages/`` or ``src/pages/``).
              Always resolved to an absolute path on construction.
        pages_dir: Name of the pages directory.  Also the prefix stripped
            from every file path when deriving route pathnames.
        non_routable_prefix: Files whose name starts with this prefix
            (``_app.tsx``, ``_document.tsx``) produce no route.
        output: Declaration file to write, relative to *root* unless absolute.
        ignore: Directory names skipped while walking the pages directory.

    """

    root: Path = field(default_factory=Path.cwd)
    pages_dir: str = "pages"
    non_routable_prefix: str = "_"
    output: Path = field(default_factory=lambda: Path("nextjs-routes.d.ts"))
    ignore: tuple[str, ...] = ("node_modules",)

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

    @property
    def pages_candidates(self) -> tuple[Path, ...]:
        """Locations searched for the pages directory, in priority order."""
        return (self.root / self.pages_dir, self.root / "src" / self.pages_dir)

    @property
    def output_path(self) -> Path:
        """Absolute path to the declaration file."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
