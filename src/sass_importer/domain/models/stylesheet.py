"""Imported artifacts — the tagged result variant of one import.

Exactly one of :class:`StructuredStylesheet` or :class:`RawText` becomes the
main object of an import.  The two share a ``kind`` discriminator so a
serialized manifest can be validated back into the right type::

    adapter = TypeAdapter(ImportedAsset)
    asset = adapter.validate_python({"kind": "text", "text": "a {}"})
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class StyleRule(BaseModel):
    """A single selector with its declarations, in source order."""

    selector: str
    declarations: dict[str, str] = Field(default_factory=dict)
    media: Optional[str] = Field(None, description="Enclosing @media query, if any")


class StructuredStylesheet(BaseModel):
    """The host's parsed stylesheet.  Starts empty; populated by the adapter."""

    kind: Literal["stylesheet"] = "stylesheet"
    rules: list[StyleRule] = Field(default_factory=list)
    editable: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.rules

    def selectors(self) -> list[str]:
        return [rule.selector for rule in self.rules]


class RawText(BaseModel):
    """Opaque text asset holding the unprocessed source."""

    kind: Literal["text"] = "text"
    text: str


ImportedAsset = Annotated[
    Union[StructuredStylesheet, RawText],
    Field(discriminator="kind"),
]
