#!/usr/bin/env python3
"""Assembly-quality filtering of BGC regions.

Fragmented assemblies split clusters across contig ends, so one BGC can be
counted twice. Regions are kept only for assemblies at the Complete or
Chromosome level; scaffold-count cutoffs are available for comparison.
"""

import pandas as pd

from ..utils.constants import HIGH_QUALITY_LEVELS, SCAFFOLD_THRESHOLDS


def qualifying_assemblies(quality, levels=HIGH_QUALITY_LEVELS):
    """Accessions whose assembly level is one of `levels`."""
    return set(quality.loc[quality['assembly_level'].isin(levels), 'accession'])


def filter_high_quality(regions, qualifying, key='genome_id'):
    """Keep rows whose accession is in the qualifying set (semi-join)."""
    return regions[regions[key].isin(qualifying)].copy()


def filter_by_scaffold_count(regions, max_scaffolds):
    """Keep regions from genomes assembled into at most max_scaffolds scaffolds."""
    return regions[regions['num_scaffolds'] <= max_scaffolds].copy()


def _filter_row(label, regions):
    bgcs = len(regions)
    on_edge = int(regions['contig_edge'].sum()) if bgcs else 0
    return {
        'filter': label,
        'genomes': regions['genome_id'].nunique(),
        'bgcs': bgcs,
        'bgcs_on_contig_edge': on_edge,
        'contig_edge_fraction': on_edge / bgcs if bgcs else float('nan'),
    }


def compare_quality_filters(regions, qualifying, thresholds=SCAFFOLD_THRESHOLDS):
    """Genomes, BGCs and contig-edge share retained under each candidate filter."""
    rows = [_filter_row('Unfiltered', regions)]
    rows.append(_filter_row('Complete/Chromosome', filter_high_quality(regions, qualifying)))
    for threshold in thresholds:
        rows.append(_filter_row(f'<= {threshold} scaffolds',
                                filter_by_scaffold_count(regions, threshold)))
    return pd.DataFrame(rows)
