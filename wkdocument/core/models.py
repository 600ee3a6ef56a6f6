"""
Domain models for building wkhtmltopdf invocations.

Defines the render configuration, generic command-line options, and the two
kinds of page source: pages backed by a file path and pages backed by
in-memory content.
"""

from __future__ import annotations

import os
from typing import IO, Annotated, Iterable, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ENV_EXECUTABLE = "WKHTMLTOPDF_PATH"
ENV_TEMP_ROOT = "WKDOCUMENT_TMPDIR"


class RenderConfig(BaseModel):
    """Settings shared by every render of a document."""

    executable: str = "wkhtmltopdf"
    temp_root: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RenderConfig":
        """
        Build a config from environment variables, falling back to defaults.

        :param environ: Mapping to read from; defaults to ``os.environ``.
        :return: A new RenderConfig.
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get(ENV_EXECUTABLE):
            values["executable"] = env[ENV_EXECUTABLE]
        if env.get(ENV_TEMP_ROOT):
            values["temp_root"] = env[ENV_TEMP_ROOT]
        return cls(**values)


class Option(BaseModel):
    """A single wkhtmltopdf flag, optionally followed by a value."""

    name: str
    value: Optional[str] = None

    def args(self) -> List[str]:
        flag = self.name if self.name.startswith("-") else f"--{self.name}"
        if self.value is None:
            return [flag]
        return [flag, self.value]


OptionLike = Union[Option, str]


def flatten_options(opts: Iterable[OptionLike]) -> List[str]:
    """Expand options into argument strings; plain strings pass through as-is."""
    args: List[str] = []
    for opt in opts:
        if isinstance(opt, Option):
            args.extend(opt.args())
        else:
            args.append(str(opt))
    return args


class FilePage(BaseModel):
    """A page whose HTML lives at a path (or URL) the renderer can open."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: str
    options: List[str] = Field(default_factory=list)


class ReaderPage(BaseModel):
    """A page whose HTML is held in memory."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reader"] = "reader"
    content: bytes
    options: List[str] = Field(default_factory=list)


Page = Annotated[Union[FilePage, ReaderPage], Field(discriminator="kind")]


def page_from_file(path: Union[str, os.PathLike], *opts: OptionLike) -> FilePage:
    """Create a page that the renderer reads from ``path``."""
    return FilePage(path=os.fspath(path), options=flatten_options(opts))


def page_from_reader(reader: Union[bytes, bytearray, str, IO], *opts: OptionLike) -> ReaderPage:
    """
    Create a page from in-memory content.

    Args:
        reader: Raw bytes, a string (encoded as UTF-8), or any object with a
            ``read()`` method. File-like readers are drained immediately.
        *opts: Page-specific options.

    Returns:
        ReaderPage: The buffered page.
    """
    if isinstance(reader, (bytes, bytearray)):
        content = bytes(reader)
    elif isinstance(reader, str):
        content = reader.encode("utf-8")
    else:
        data = reader.read()
        content = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return ReaderPage(content=content, options=flatten_options(opts))
