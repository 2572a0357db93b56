#!/usr/bin/env python3
"""Load the reference and per-genome tables into a common schema."""

import pandas as pd

from ..utils.constants import (
    BGC_CATEGORIES, DEFAULT_CLASS_CATEGORIES, LINEAGE_RANKS, UNCLASSIFIED
)
from ..utils.parsers import normalize_assembly_level, parse_bool, read_accession_list

# Header aliases seen in NCBI and SMC exports -> pipeline schema
CLASS_MAP_RENAMES = {
    'class': 'bgc_class',
    'BGC_class': 'bgc_class',
    'bgc_type': 'bgc_class',
    'Category': 'category',
    'bgc_category': 'category',
}

TAXONOMY_RENAMES = {
    '#assembly_accession': 'accession',
    '# assembly_accession': 'accession',
    'assembly_accession': 'accession',
    'Assembly Accession': 'accession',
    'assembly': 'accession',
    'tax_id': 'taxid',
    'taxId': 'taxid',
    'species_taxid': 'taxid',
    'domain': 'superkingdom',
}

QUALITY_RENAMES = {
    '#assembly_accession': 'accession',
    '# assembly_accession': 'accession',
    'assembly_accession': 'accession',
    'Assembly Accession': 'accession',
    'Assembly Level': 'assembly_level',
    'level': 'assembly_level',
}

REGION_RENAMES = {
    'genome': 'genome_id',
    'assembly': 'genome_id',
    'assembly_accession': 'genome_id',
    'bgc_length': 'length',
    'region_length': 'length',
    'scaffolds': 'num_scaffolds',
    'n_scaffolds': 'num_scaffolds',
    'on_contig_edge': 'contig_edge',
    'class': 'bgc_class',
    'product': 'bgc_class',
    'bgc_type': 'bgc_class',
}

SOURCE_RENAMES = {
    'Genus': 'genus',
    'Source': 'source',
    'count': 'genome_count',
    'genomes': 'genome_count',
}


def _read_tsv(path, renames):
    df = pd.read_csv(path, sep='\t', dtype=str, keep_default_na=False)
    df.columns = [col.strip() for col in df.columns]
    return df.rename(columns={k: v for k, v in renames.items() if k in df.columns})


def _require(df, columns, path):
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing required column(s) {', '.join(missing)}")


def load_class_categories(path=None):
    """Load the BGC class -> category lookup.

    Without a path the built-in antiSMASH vocabulary is returned. Category
    values outside the seven known categories are rejected.
    """
    if path is None:
        return dict(DEFAULT_CLASS_CATEGORIES)

    df = _read_tsv(path, CLASS_MAP_RENAMES)
    _require(df, ['bgc_class', 'category'], path)

    mapping = {}
    for bgc_class, category in zip(df['bgc_class'], df['category']):
        bgc_class = bgc_class.strip()
        category = category.strip()
        if not bgc_class:
            continue
        if category not in BGC_CATEGORIES:
            raise ValueError(f"{path}: class {bgc_class!r} maps to unknown category {category!r}")
        mapping[bgc_class] = category

    print(f"Loaded {len(mapping)} BGC class mappings")
    return mapping


def load_taxonomy(path):
    """Load the genome taxonomy table (accession -> taxid and full lineage)."""
    df = _read_tsv(path, TAXONOMY_RENAMES)
    _require(df, ['accession'], path)

    for rank in ['taxid'] + LINEAGE_RANKS:
        if rank not in df.columns:
            df[rank] = ''

    df = df[['accession', 'taxid'] + LINEAGE_RANKS].copy()
    df['accession'] = df['accession'].str.strip()
    df = df.drop_duplicates(subset='accession', keep='first')
    print(f"Loaded taxonomy for {len(df)} assemblies")
    return df.reset_index(drop=True)


def load_assembly_quality(path):
    """Load accession -> assembly level, normalised to the four NCBI levels."""
    df = _read_tsv(path, QUALITY_RENAMES)
    _require(df, ['accession', 'assembly_level'], path)

    df = df[['accession', 'assembly_level']].copy()
    df['accession'] = df['accession'].str.strip()
    df['assembly_level'] = df['assembly_level'].map(normalize_assembly_level)
    df = df.drop_duplicates(subset='accession', keep='first')
    print(f"Loaded assembly levels for {len(df)} assemblies")
    return df.reset_index(drop=True)


def _genus_lookup(taxonomy):
    genus = taxonomy.drop_duplicates(subset='accession').set_index('accession')['genus']
    return genus[genus.notna() & (genus.astype(str).str.strip() != '')]


def load_regions(path, taxonomy=None):
    """Load the per-genome BGC region table.

    When a taxonomy table is given, genus is taken from it (left join on the
    genome accession); genomes without a genus get the Unclassified sentinel.
    """
    df = _read_tsv(path, REGION_RENAMES)
    _require(df, ['genome_id', 'length', 'num_scaffolds', 'contig_edge', 'bgc_class'], path)

    df = df.copy()
    df['genome_id'] = df['genome_id'].str.strip()
    df['length'] = pd.to_numeric(df['length']).astype(int)
    df['num_scaffolds'] = pd.to_numeric(df['num_scaffolds']).astype(int)
    df['contig_edge'] = df['contig_edge'].map(parse_bool).astype(bool)

    if 'genus' not in df.columns:
        df['genus'] = ''

    if taxonomy is not None:
        lookup = _genus_lookup(taxonomy)
        joined = df['genome_id'].map(lookup)
        df['genus'] = joined.where(joined.notna(), df['genus'])

        unmatched = set(df['genome_id']) - set(taxonomy['accession'])
        if unmatched:
            print(f"Warning: {len(unmatched)} genomes in {path} are missing from the taxonomy table")

    df['genus'] = df['genus'].fillna('').astype(str).str.strip().replace('', UNCLASSIFIED)

    columns = ['genome_id', 'length', 'num_scaffolds', 'contig_edge', 'bgc_class', 'genus']
    extra = [col for col in df.columns if col not in columns]
    print(f"Loaded {len(df)} BGC regions from {df['genome_id'].nunique()} genomes")
    return df[columns + extra].reset_index(drop=True)


def attach_assembly_quality(regions, quality):
    """Left join assembly_level onto regions; absent accessions stay null."""
    levels = quality.set_index('accession')['assembly_level']
    return regions.assign(assembly_level=regions['genome_id'].map(levels))


def load_zero_hit_accessions(path):
    """Accessions that were annotated but produced no BGC regions."""
    accessions = read_accession_list(path)
    print(f"Loaded {len(accessions)} zero-hit accessions")
    return accessions


def zero_hit_genomes(accessions, taxonomy=None):
    """Attach genus to zero-hit accessions; unknown taxonomy -> Unclassified."""
    df = pd.DataFrame({'accession': list(dict.fromkeys(accessions))}, dtype=str)
    if taxonomy is not None:
        df['genus'] = df['accession'].map(_genus_lookup(taxonomy))
        missing = int(df['genus'].isna().sum())
        if missing:
            print(f"Warning: {missing} zero-hit accessions have no genus assignment")
    else:
        df['genus'] = None
    df['genus'] = df['genus'].fillna(UNCLASSIFIED)
    return df


def load_genome_sources(path):
    """Per-genus genome counts broken down by source database."""
    df = _read_tsv(path, SOURCE_RENAMES)
    _require(df, ['genus', 'genome_count'], path)
    if 'source' not in df.columns:
        df['source'] = 'all'

    df = df[['genus', 'source', 'genome_count']].copy()
    df['genus'] = df['genus'].str.strip().replace('', UNCLASSIFIED)
    df['genome_count'] = pd.to_numeric(df['genome_count']).astype(int)
    return df.reset_index(drop=True)
