"""Form input processing helpers."""

from gradforms.processing.normalization import (
    build_step_record,
    coerce_flag,
    coerce_number,
    coerce_text,
    coerce_text_list,
    coerce_upload,
)

__all__ = [
    "build_step_record",
    "coerce_flag",
    "coerce_number",
    "coerce_text",
    "coerce_text_list",
    "coerce_upload",
]
