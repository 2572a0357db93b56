"""Shared fixtures for BGC pipeline tests."""

import json

import matplotlib

matplotlib.use('Agg')

import pandas as pd
import pytest

from cyanobgc.viz import RenderConfig


CLASS_MAP = {
    'NRPS': 'NRP',
    'PKS': 'Polyketide',
    'T1PKS': 'Polyketide',
    'terpene': 'Terpene',
    'lanthipeptide': 'RiPP',
    'cyanobactin': 'RiPP',
    'indole': 'Alkaloid',
    'oligosaccharide': 'Saccharide',
    'other': 'Other',
}


def write_tsv(path, rows, columns):
    pd.DataFrame(rows, columns=columns).to_csv(path, sep='\t', index=False)
    return path


def make_regions(rows):
    """Region frame from (genome_id, genus, length, num_scaffolds, contig_edge, bgc_class) tuples."""
    return pd.DataFrame(rows, columns=['genome_id', 'genus', 'length', 'num_scaffolds',
                                       'contig_edge', 'bgc_class'])


@pytest.fixture
def class_map():
    return dict(CLASS_MAP)


@pytest.fixture
def render_config():
    return RenderConfig(dpi=50, formats=('png',), top_genera=10)


@pytest.fixture
def two_genome_inputs(tmp_path):
    """Genome A (Complete, 3 BGCs) and genome B (Scaffold, 5 BGCs) as input files."""
    write_tsv(tmp_path / 'class_map.tsv', list(CLASS_MAP.items()), ['bgc_class', 'category'])

    write_tsv(tmp_path / 'taxonomy.tsv', [
        ['GCF_A', '1', 'Bacteria', 'Cyanobacteriota', 'Cyanophyceae', 'Nostocales',
         'Nostocaceae', 'Nostoc', 'Nostoc sp. A'],
        ['GCF_B', '2', 'Bacteria', 'Cyanobacteriota', 'Cyanophyceae', 'Oscillatoriales',
         'Microcoleaceae', 'Planktothrix', 'Planktothrix sp. B'],
        ['GCF_Z', '3', 'Bacteria', 'Cyanobacteriota', 'Cyanophyceae', 'Nostocales',
         'Nostocaceae', 'Nostoc', 'Nostoc sp. Z'],
    ], ['#assembly_accession', 'taxid', 'superkingdom', 'phylum', 'class', 'order',
        'family', 'genus', 'species'])

    write_tsv(tmp_path / 'assembly_quality.tsv', [
        ['GCF_A', 'Complete Genome'],
        ['GCF_B', 'Scaffold'],
        ['GCF_Z', 'Chromosome'],
    ], ['assembly_accession', 'assembly_level'])

    write_tsv(tmp_path / 'regions.tsv', [
        ['GCF_A', 40000, 1, 'False', json.dumps(['NRPS'])],
        ['GCF_A', 30000, 1, 'False', json.dumps(['PKS'])],
        ['GCF_A', 60000, 1, 'False', json.dumps(['NRPS', 'PKS'])],
        ['GCF_B', 20000, 120, 'True', 'terpene'],
        ['GCF_B', 8000, 120, 'True', 'lanthipeptide'],
        ['GCF_B', 15000, 120, 'False', json.dumps(['PKS', 'NRPS'])],
        ['GCF_B', 22000, 120, 'True', 'indole'],
        ['GCF_B', 12000, 120, 'False', json.dumps(['terpene', 'cyanobactin'])],
    ], ['genome', 'bgc_length', 'num_scaffolds', 'contig_edge', 'bgc_class'])

    (tmp_path / 'zero_hits.txt').write_text('# genomes without BGCs\nGCF_Z\n\n')

    write_tsv(tmp_path / 'genome_sources.tsv', [
        ['Nostoc', 'NCBI', 1],
        ['Nostoc', 'SMC', 1],
        ['Planktothrix', 'NCBI', 1],
    ], ['genus', 'source', 'genome_count'])

    write_tsv(tmp_path / 'bigslice.tsv', [
        ['GCF_A', '101'],
        ['GCF_A', '102'],
        ['GCF_A', '102'],
        ['GCF_B', '103'],
    ], ['genome_id', 'gcf_id'])

    return tmp_path
