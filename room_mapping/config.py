"""
Configuration for region extraction and room assignment.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


OVERLAP_POLICIES = ("error", "warn")


@dataclass
class RoomMappingConfig:
    """Configuration parameters for the mapping pipeline."""

    # Segmentation: codes that never form regions (wall, outline, empty)
    boundary_codes: Tuple[Optional[str], ...] = ("W", "B", None)

    # Single-room matching defaults when a seed omits them
    default_min_cells: int = 15
    default_max_dist: float = 80.0

    # Area-batch matching default
    area_min_cells: int = 1

    # Rasterization: what to do when two rooms claim the same cell
    on_overlap: str = "error"

    # Indentation of the region catalog JSON (None for compact)
    catalog_indent: Optional[int] = 2

    def __post_init__(self):
        """Validate configuration values."""
        self.boundary_codes = tuple(self.boundary_codes)
        for code in self.boundary_codes:
            if code is not None and (not isinstance(code, str) or not code):
                raise ValueError(f"boundary_codes entries must be type codes or None, got {code!r}")
        if self.default_min_cells < 1:
            raise ValueError("default_min_cells must be at least 1")
        if self.default_max_dist < 0:
            raise ValueError("default_max_dist must be non-negative")
        if self.area_min_cells < 1:
            raise ValueError("area_min_cells must be at least 1")
        if self.on_overlap not in OVERLAP_POLICIES:
            raise ValueError(
                f"on_overlap must be one of {OVERLAP_POLICIES}, got {self.on_overlap!r}"
            )
