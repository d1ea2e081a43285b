"""Raw-text import for partials and files whose imports do not resolve."""

from __future__ import annotations

from sass_importer.domain.models.asset import SourceAsset
from sass_importer.domain.models.stylesheet import RawText
from sass_importer.domain.ports.import_context import ImportContextPort

TEXT_OBJECT_ID = "text"


class FallbackTextImporter:
    """Register the unprocessed source as the import's main object."""

    def import_text(self, asset: SourceAsset, context: ImportContextPort) -> RawText:
        text_asset = RawText(text=asset.text)
        context.add_object(TEXT_OBJECT_ID, text_asset)
        context.set_main_object(text_asset)
        return text_asset
