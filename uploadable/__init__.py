"""
Uploadable — upload configuration for record models.

    from uploadable import UploadOptions

    options = UploadOptions.create().get_upload_options_default()
"""

from uploadable.engine.errors import (
    UploadableConfigError,
    UploadableError,
    UploadableValidationError,
)
from uploadable.model import UploadableModel
from uploadable.options import UploadOptions

__version__ = "1.0.0"
__all__ = [
    "UploadOptions",
    "UploadableModel",
    "UploadableError",
    "UploadableConfigError",
    "UploadableValidationError",
]
