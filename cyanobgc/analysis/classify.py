#!/usr/bin/env python3
"""Classify BGC regions into category combinations and lump rare ones."""

import pandas as pd

from ..utils.constants import (
    ALWAYS_DISTINCT, COMBINATION_SEPARATOR, LUMP_THRESHOLD, LUMPED_LABEL
)
from ..utils.parsers import parse_class_field


class UnmappedClassError(KeyError):
    """BGC class names missing from the class -> category lookup."""

    def __init__(self, classes):
        self.classes = sorted(set(classes))
        super().__init__(
            f"No category mapping for BGC class(es): {', '.join(self.classes)}. "
            "The class -> category table is out of date."
        )

    def __str__(self):
        return self.args[0]


def classify(raw_class_field, class_categories):
    """Return the sorted, distinct categories for one raw class field."""
    field = parse_class_field(raw_class_field)
    unmapped = [label for label in field.labels if label not in class_categories]
    if unmapped:
        raise UnmappedClassError(unmapped)
    return tuple(sorted({class_categories[label] for label in field.labels}))


def combination_key(categories):
    """Canonical string for a set of categories, e.g. 'NRP, Polyketide'."""
    return COMBINATION_SEPARATOR.join(sorted(set(categories)))


def classify_regions(regions, class_categories):
    """Add classes, categories and combination columns to a copy of regions.

    Every unmapped class in the table is reported in a single error.
    """
    fields = regions['bgc_class'].map(parse_class_field)

    unmapped = {label for field in fields for label in field.labels
                if label not in class_categories}
    if unmapped:
        raise UnmappedClassError(unmapped)

    classes = fields.map(lambda field: field.labels)
    categories = classes.map(lambda labels: tuple(sorted({class_categories[label] for label in labels})))

    return regions.assign(
        classes=classes,
        categories=categories,
        combination=categories.map(combination_key),
    )


def rank_combinations(regions):
    """Count regions per combination, most frequent first (ties alphabetical)."""
    counts = regions.groupby('combination').size()
    ranked = sorted(counts.items(), key=lambda x: (-x[1], x[0]))
    return pd.Series(
        [count for _, count in ranked],
        index=pd.Index([combination for combination, _ in ranked], name='combination'),
        name='count',
        dtype=int,
    )


def lump(combination, count, threshold=LUMP_THRESHOLD):
    """Collapse rare combinations into the 'All other hybrids' bucket.

    'NRP, Polyketide' is always kept distinct.
    """
    if count >= threshold or combination == ALWAYS_DISTINCT:
        return combination
    return LUMPED_LABEL


def lump_combinations(counts, threshold=LUMP_THRESHOLD):
    """Map every combination in a count Series to its lumped group."""
    return {combination: lump(combination, count, threshold)
            for combination, count in counts.items()}


def lumped_group_order(counts, lumped):
    """Lumped groups ordered by total count, with the catch-all bucket last."""
    totals = {}
    for combination, count in counts.items():
        group = lumped[combination]
        totals[group] = totals.get(group, 0) + count
    order = sorted(totals, key=lambda g: (g == LUMPED_LABEL, -totals[g], g))
    return order


def explode_categories(regions):
    """One row per (region, category); hybrids contribute to each category."""
    exploded = regions[['genome_id', 'genus', 'categories']].copy()
    exploded['is_hybrid'] = exploded['categories'].map(len) > 1
    exploded = exploded.explode('categories').rename(columns={'categories': 'category'})
    return exploded.reset_index(drop=True)
