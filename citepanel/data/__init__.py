"""Input record validation for CitePanel."""

from .validators import (
    assert_required_fields,
    validate_present_fields,
    validate_required_fields,
)

__all__ = [
    "assert_required_fields",
    "validate_present_fields",
    "validate_required_fields",
]
