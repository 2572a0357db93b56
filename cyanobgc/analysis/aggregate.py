#!/usr/bin/env python3
"""Aggregate quality-filtered BGC regions by combination and by genus."""

import pandas as pd

from .classify import lump_combinations, rank_combinations
from ..utils.constants import LUMP_THRESHOLD


def length_stats_by_combination(regions):
    """Count and length statistics (bp) per category combination.

    sd is the sample standard deviation (N-1); it is NaN for a single region.
    """
    stats = regions.groupby('combination')['length'].agg(
        count='count', min='min', max='max', mean='mean', median='median', sd='std'
    ).reset_index()
    stats['count'] = stats['count'].astype(int)
    stats['mean'] = stats['mean'].astype(float)
    stats['median'] = stats['median'].astype(float)
    stats = stats.sort_values(['count', 'combination'], ascending=[False, True])
    return stats.reset_index(drop=True)


def genus_combination_counts(regions, lumped=None, threshold=LUMP_THRESHOLD):
    """Regions per (genus, combination) with the lumped group of each combination."""
    if lumped is None:
        lumped = lump_combinations(rank_combinations(regions), threshold)
    counts = regions.groupby(['genus', 'combination']).size().reset_index(name='count')
    counts['lumped_group'] = counts['combination'].map(lumped)
    return counts.sort_values(['genus', 'count'], ascending=[True, False]).reset_index(drop=True)


def genus_genome_totals(regions, zero_hits):
    """Genomes per genus: those with at least one BGC plus recorded zero-hit genomes.

    A zero-hit accession that also has BGC records is counted once, as a
    genome with BGCs.
    """
    with_bgcs = regions[['genome_id', 'genus']].drop_duplicates(subset='genome_id')
    detected = with_bgcs.groupby('genus').size().rename('genomes_with_bgcs')

    zero = zero_hits.drop_duplicates(subset='accession')
    zero = zero[~zero['accession'].isin(with_bgcs['genome_id'])]
    empty = zero.groupby('genus').size().rename('zero_hit_genomes')

    totals = pd.concat([detected, empty], axis=1).fillna(0).astype(int)
    totals.index.name = 'genus'
    totals['genome_count'] = totals['genomes_with_bgcs'] + totals['zero_hit_genomes']
    totals = totals.reset_index().sort_values(['genome_count', 'genus'], ascending=[False, True])
    return totals.reset_index(drop=True)


def genus_density(genus_counts, genome_totals):
    """BGCs per genome for every (genus, lumped group).

    Genera without a positive genome count have no defined density and are
    left out.
    """
    grouped = genus_counts.groupby(['genus', 'lumped_group'])['count'].sum().reset_index()
    totals = genome_totals[genome_totals['genome_count'] > 0][['genus', 'genome_count']]
    density = grouped.merge(totals, on='genus', how='inner')
    density['density'] = density['count'].astype(float) / density['genome_count'].astype(float)
    return density.sort_values(['genus', 'density'], ascending=[True, False]).reset_index(drop=True)


def gcf_counts_per_genus(gcf_assignments):
    """Number of distinct GCFs observed in each genus."""
    pairs = gcf_assignments[['genus', 'gcf_id']].drop_duplicates()
    counts = pairs.groupby('genus').size().reset_index(name='gcf_count')
    return counts.sort_values(['gcf_count', 'genus'], ascending=[False, True]).reset_index(drop=True)


def genus_summary(regions, genome_totals, gcf_counts=None):
    """Per-genus rollup of BGC, genome and GCF counts."""
    bgcs = regions.groupby('genus').size().rename('bgc_count')
    summary = genome_totals.set_index('genus').join(bgcs, how='outer')
    summary['bgc_count'] = summary['bgc_count'].fillna(0).astype(int)
    for col in ('genomes_with_bgcs', 'zero_hit_genomes', 'genome_count'):
        summary[col] = summary[col].fillna(0).astype(int)

    summary['bgcs_per_genome'] = summary['bgc_count'] / summary['genome_count'].where(summary['genome_count'] > 0)

    if gcf_counts is not None:
        summary = summary.join(gcf_counts.set_index('genus')['gcf_count'], how='left')
        summary['gcf_count'] = summary['gcf_count'].fillna(0).astype(int)
    else:
        summary['gcf_count'] = 0

    summary.index.name = 'genus'
    summary = summary.reset_index()[['genus', 'bgc_count', 'genomes_with_bgcs', 'zero_hit_genomes',
                                     'genome_count', 'bgcs_per_genome', 'gcf_count']]
    return summary.sort_values(['bgc_count', 'genus'], ascending=[False, True]).reset_index(drop=True)


def genome_bgc_counts(regions):
    """BGCs per genome split by contig-edge flag, with the genome's scaffold count.

    The assembly level is carried along when the regions have one attached.
    """
    columns = {
        'num_scaffolds': ('num_scaffolds', 'max'),
        'bgc_count': ('length', 'size'),
    }
    if 'assembly_level' in regions.columns:
        columns['assembly_level'] = ('assembly_level', 'first')
    counts = regions.groupby(['genome_id', 'contig_edge']).agg(**columns).reset_index()
    return counts
