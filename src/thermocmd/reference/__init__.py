"""Educational reference content about temperature scales."""

from thermocmd.reference.catalog import (
    load_catalog,
    reference_readings,
    scale_by_id,
    scale_by_name,
    scale_detail,
)

__all__ = ["load_catalog", "reference_readings", "scale_by_id", "scale_by_name", "scale_detail"]
