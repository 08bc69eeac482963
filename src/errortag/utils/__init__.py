from .dicts import deep_merge, insert_path
from .validation import format_validation_error

__all__ = ["deep_merge", "format_validation_error", "insert_path"]
