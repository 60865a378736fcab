"""End-to-end cover page pipeline."""

from .cover_pipeline import CoverPipeline, build_field_values, build_template_data

__all__ = ["CoverPipeline", "build_field_values", "build_template_data"]
