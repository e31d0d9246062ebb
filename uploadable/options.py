"""
Uploadable Options — fluent configuration for a model's file uploads.

UploadOptions describes how files attached to a record are validated, named
and stored: directory mask, filename suffix, upload attributes, allowed MIME
types, base path and per-attribute path overrides.

Usage:
    options = (
        UploadOptions.create()
        .set_uploads_attributes(["image", "image_mobile"])
        .set_mime_type(["image/png"])
        .set_upload_base_path("public/upload/news")
        .set_upload_paths({"image_mobile": "public/upload/news/mobile"})
    )

Setters store what they are given (paths are canonicalized first) and never
raise. Read helpers at the bottom are what an upload handler calls.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from uploadable.engine.config import get_config
from uploadable.engine.errors import UploadableValidationError
from uploadable.engine.paths import public_path
from uploadable.utilities import dir_helper

logger = logging.getLogger("uploadable.options")


class UploadOptions(BaseModel):
    """
    Upload configuration for one uploadable model.

    Mutable by design: each setter changes this instance and returns it, so
    calls can be chained. get_upload_options_default() is the exception and
    always builds a new instance.
    """

    create_dir_mode_mask: str = Field(
        default="0755", description="Octal permission mask for created upload dirs"
    )
    append_model_id_suffix: bool = Field(
        default=True,
        description="Store 'name.jpg' as 'name<separator><model id>.jpg'",
    )
    file_name_suffix_separator: str = Field(
        default="_", description="Separator between file name and model id"
    )
    upload_attributes: List[str] = Field(
        default_factory=list, description="Model attributes holding uploads, e.g. ['image']"
    )
    allowed_mime_types: List[str] = Field(
        default_factory=list, description="Accepted MIME types, e.g. ['image/png']"
    )
    upload_base_path: Optional[str] = Field(
        default=None, description="Canonical base directory for stored uploads"
    )
    upload_path_overrides: Dict[str, str] = Field(
        default_factory=dict,
        description="attribute -> path; '' means use the base path",
    )

    @classmethod
    def create(cls) -> UploadOptions:
        return cls()

    # -------------------------------------------------------------------
    # Builder
    # -------------------------------------------------------------------

    def set_create_dir_mode_mask(self, mask: str) -> UploadOptions:
        """Permission mask for new upload dirs (e.g. '0755'). Not validated here."""
        self.create_dir_mode_mask = mask
        return self

    def append_model_id_suffix_in_file_name(self) -> UploadOptions:
        """
        Append the model id to stored file names.

        Ex.: 'pippo.jpg' uploaded for model 12 is stored as 'pippo_12.jpg'.
        """
        self.append_model_id_suffix = True
        return self

    def dont_append_model_id_suffix_in_file_name(self) -> UploadOptions:
        self.append_model_id_suffix = False
        return self

    def set_file_name_suffix_separator(self, separator: str) -> UploadOptions:
        self.file_name_suffix_separator = separator
        return self

    def set_uploads_attributes(self, attributes: List[str]) -> UploadOptions:
        """Replace the upload attributes, e.g. ['image', 'image_mobile']."""
        self.upload_attributes = list(attributes)
        return self

    def set_mime_type(self, mime_types: List[str]) -> UploadOptions:
        """
        Replace the accepted MIME types, e.g. ['image/gif', 'image/jpeg', 'image/png'].

        A full listing of MIME types is kept by the Apache httpd project in
        docs/conf/mime.types.
        """
        self.allowed_mime_types = list(mime_types)
        return self

    def set_upload_base_path(self, path: str) -> UploadOptions:
        """Upload base path, e.g. 'public/upload/news'. Stored canonicalized."""
        self.upload_base_path = dir_helper.canonicalize(path)
        logger.debug(f"Upload base path: {path!r} -> {self.upload_base_path!r}")
        return self

    def set_upload_paths(self, attribute_paths: Dict[str, str]) -> UploadOptions:
        """
        Replace the per-attribute base path overrides.

        Paths are absolute or relative to the public folder.
        Ex.: {'image': 'product', 'image_thumb': 'product/thumb'}

        Non-empty paths are canonicalized; '' is kept as-is and means
        "use the base path".
        """
        self.upload_path_overrides = {
            attribute: path if path == "" else dir_helper.canonicalize(path)
            for attribute, path in attribute_paths.items()
        }
        return self

    def get_upload_options_default(self) -> UploadOptions:
        """
        Build a new instance with the recommended defaults.

        Values come from the `defaults` section of uploadable.yaml, which
        itself defaults to mask '0755', id suffix on, separator '_',
        attributes ['image', 'image_mobile'] and the gif/jpeg/png MIME types.
        The base path is the public 'upload/' directory.
        """
        config = get_config()
        defaults = config.defaults

        options = (
            UploadOptions.create()
            .set_create_dir_mode_mask(defaults.create_dir_mode_mask)
            .set_file_name_suffix_separator(defaults.file_name_suffix_separator)
            .set_uploads_attributes(defaults.upload_attributes)
            .set_mime_type(defaults.allowed_mime_types)
            .set_upload_base_path(public_path(config.upload_dir))
            .set_upload_paths({})
        )
        if defaults.append_model_id_suffix:
            options.append_model_id_suffix_in_file_name()
        else:
            options.dont_append_model_id_suffix_in_file_name()
        return options

    # -------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------

    @property
    def dir_mode(self) -> int:
        """The directory mask as an int, e.g. '0755' -> 0o755."""
        try:
            return int(self.create_dir_mode_mask, 8)
        except ValueError:
            raise UploadableValidationError(
                f"Invalid directory mode mask '{self.create_dir_mode_mask}'",
                option="create_dir_mode_mask",
                value=self.create_dir_mode_mask,
                validation_errors=[{
                    "loc": ["create_dir_mode_mask"],
                    "msg": "must be an octal string",
                    "input": self.create_dir_mode_mask,
                }],
            ) from None

    def is_upload_attribute(self, attribute: str) -> bool:
        return attribute in self.upload_attributes

    def accepts_mime_type(self, mime_type: str) -> bool:
        """
        Check a MIME type against allowed_mime_types.

        Supports:
        - Exact match: "image/png"
        - Wildcard category: "image/*"
        - Universal: "*/*"
        """
        mime_type = mime_type.lower()
        for allowed in self.allowed_mime_types:
            allowed = allowed.lower()
            if allowed in ("*/*", mime_type):
                return True
            # "image/*" matches "image/png"
            if allowed.endswith("/*") and mime_type.startswith(allowed[:-1]):
                return True
        return False

    def get_upload_path(self, attribute: str) -> Optional[str]:
        """
        Directory where uploads for `attribute` are stored.

        A non-empty override wins; relative overrides are resolved against
        the public folder. Otherwise the base path (None if unset).
        """
        override = self.upload_path_overrides.get(attribute, "")
        if not override:
            return self.upload_base_path
        if dir_helper.is_absolute(override):
            return dir_helper.canonicalize(override)
        return public_path(override)

    def build_file_name(self, file_name: str, model_id: Any) -> str:
        """
        Final stored name for an uploaded file.

        Ex.: build_file_name('pippo.jpg', 12) -> 'pippo_12.jpg'
        """
        if not self.append_model_id_suffix:
            return file_name
        stem, ext = os.path.splitext(file_name)
        return f"{stem}{self.file_name_suffix_separator}{model_id}{ext}"

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
