"""
Uploadable Model Mixin — the model-side hook for upload configuration.

Mix into any record class and override get_upload_options() to customize:

    class News(Base, UploadableModel):
        def get_upload_options(self) -> UploadOptions:
            return (
                UploadOptions.create()
                .get_upload_options_default()
                .set_uploads_attributes(["image", "image_thumb"])
                .set_upload_paths({"image_thumb": "upload/news/thumb"})
            )
"""

from __future__ import annotations

from functools import cached_property

from uploadable.options import UploadOptions


class UploadableModel:
    """Gives a record an upload configuration; defaults to the library preset."""

    def get_upload_options(self) -> UploadOptions:
        return UploadOptions.create().get_upload_options_default()

    @cached_property
    def upload_options(self) -> UploadOptions:
        """Options for this instance, resolved once from get_upload_options()."""
        return self.get_upload_options()
