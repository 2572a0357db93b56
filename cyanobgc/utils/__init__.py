"""Shared utilities for BGC analysis pipeline."""

from .constants import (
    BGC_CATEGORIES, CATEGORY_COLORS, GROUP_COLORS, LUMP_THRESHOLD, LUMPED_LABEL,
    ALWAYS_DISTINCT, UNCLASSIFIED, HIGH_QUALITY_LEVELS, SCAFFOLD_THRESHOLDS,
    DEFAULT_CLASS_CATEGORIES
)
from .parsers import (
    RawClassField, parse_class_field, normalize_assembly_level, parse_bool,
    read_accession_list, is_sqlite_file
)
