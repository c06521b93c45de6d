"""Domain models for site build configuration."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter

TextDirection = Literal["ltr", "rtl"]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DirectoryMap(_FrozenModel):
    """Role-to-path bindings used to locate sources and emit output.

    ``includes``, ``layouts`` and ``data`` are relative to ``input``.
    """

    input: str = Field(..., description="Source root")
    output: str = Field(..., description="Build output root")
    includes: str = Field(
        default="_includes", alias="includesDir", description="Partials directory"
    )
    layouts: str = Field(
        default="_layouts", alias="layoutsDir", description="Layouts directory"
    )
    data: str = Field(
        default="_data", alias="dataDir", description="Global data files directory"
    )

    def roles(self) -> dict[str, str]:
        return {
            "input": self.input,
            "output": self.output,
            "includes": self.includes,
            "layouts": self.layouts,
            "data": self.data,
        }


class PassthroughRule(_FrozenModel):
    """A path copied verbatim into the output tree, bypassing rendering."""

    source: str = Field(..., min_length=1, description="Path relative to project root")

    def destination(self, dirs: DirectoryMap) -> PurePosixPath:
        """Return the output-relative location for this rule."""
        source = PurePosixPath(self.source)
        input_root = PurePosixPath(dirs.input)
        try:
            relative = source.relative_to(input_root)
        except ValueError:
            relative = source
        return PurePosixPath(dirs.output) / relative


class LanguageDescriptor(_FrozenModel):
    """One supported UI language."""

    name: str = Field(..., min_length=1, description="English display name")
    dir: TextDirection = Field(default="ltr", description="Text direction")
    native: str = Field(..., min_length=1, description="Endonym")


LanguageCode = Annotated[
    str, StringConstraints(pattern=r"^[a-z]{2,3}(-[A-Za-z0-9]{2,8})*$")
]

LanguageTable = TypeAdapter(dict[LanguageCode, LanguageDescriptor])


class EngineConfig(_FrozenModel):
    """Aggregate handed to the site engine by a configuration resolver."""

    dir: DirectoryMap
    markdown_template_engine: str = Field(
        default="njk", alias="markdownTemplateEngine"
    )
    html_template_engine: str = Field(default="njk", alias="htmlTemplateEngine")
    template_formats: tuple[str, ...] = Field(
        default=("md", "njk", "html"), alias="templateFormats"
    )
