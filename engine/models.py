"""
Core models for the assetpipe engine.

Plain data carried between the walker, the composers and the outer drivers.
Nothing here holds build state across invocations.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional
from pathlib import Path
from pydantic import BaseModel, Field


# ============================================================================
# Source Models
# ============================================================================


@dataclass(frozen=True)
class ScriptModule:
    """An app script and the identifier it registers under."""

    module_id: str
    path: Path


class ProjectLayout(BaseModel):
    """Directory layout the composers read from and the build writes to.

    Relative entries are resolved against ``root``.
    """

    root: Path = Field(default_factory=Path.cwd)
    vendor_scripts: Path = Field(default=Path("vendor") / "scripts")
    app_scripts: Path = Field(default=Path("app") / "scripts")
    app_styles: Path = Field(default=Path("app") / "styles")
    output: Path = Field(default=Path("public"))

    def resolve(self, path: Path) -> Path:
        """Anchor a layout entry to the project root."""
        if path.is_absolute():
            return path
        return self.root / path

    @property
    def vendor_root(self) -> Path:
        return self.resolve(self.vendor_scripts)

    @property
    def app_root(self) -> Path:
        return self.resolve(self.app_scripts)

    @property
    def styles_root(self) -> Path:
        return self.resolve(self.app_styles)

    @property
    def output_dir(self) -> Path:
        return self.resolve(self.output)


# ============================================================================
# Build Results
# ============================================================================


class FileSetSnapshot(BaseModel):
    """The files one composition considered, in the order they were used."""

    kind: Literal["script", "style"]
    files: List[Path] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)

    def as_strings(self) -> List[str]:
        return [str(p) for p in self.files]


class CompositionResult(BaseModel):
    """Outcome of a successful composition."""

    snapshot: FileSetSnapshot
    bytes_written: int = 0
    modules: List[str] = Field(default_factory=list, description="Module ids in registration order")


class BuildArtifacts(BaseModel):
    """Files written by a one-shot build."""

    index_html: Path
    index_js: Path
    index_css: Path
    script: Optional[CompositionResult] = None
    style: Optional[CompositionResult] = None
