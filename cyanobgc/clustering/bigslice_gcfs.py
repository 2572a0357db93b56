#!/usr/bin/env python3
"""Load genome -> GCF assignments from BiG-SLiCE clustering results."""

import sqlite3

import pandas as pd

from ..utils.constants import UNCLASSIFIED
from ..utils.parsers import is_sqlite_file

GCF_RENAMES = {
    'genome': 'genome_id',
    'dataset': 'genome_id',
    'orig_folder': 'genome_id',
    'assembly': 'genome_id',
    'gcf': 'gcf_id',
    'family_id': 'gcf_id',
    'gcf_membership': 'gcf_id',
    'Genus': 'genus',
}


def load_gcf_assignments_db(db_path):
    """Read rank-0 GCF memberships of the first clustering run from data.db.

    Only memberships within the clustering threshold are kept; the genome is
    the antiSMASH input folder BiG-SLiCE recorded for each BGC.
    """
    with sqlite3.connect(str(db_path)) as con:
        cur = con.cursor()

        run_info = cur.execute("SELECT id, threshold FROM clustering WHERE run_id=1").fetchone()
        if not run_info:
            raise ValueError(f"No clustering data found in {db_path}")
        clustering_id, threshold = run_info

        rows = cur.execute(
            """SELECT
                bgc.orig_folder,
                gcf_membership.gcf_id
            FROM bgc, gcf, gcf_membership
            WHERE gcf_membership.bgc_id=bgc.id
              AND gcf_membership.gcf_id=gcf.id
              AND gcf.clustering_id=?
              AND gcf_membership.rank=0
              AND gcf_membership.membership_value <= ?""",
            (clustering_id, threshold)).fetchall()

    print(f"Read {len(rows)} GCF memberships from {db_path} (threshold={float(threshold)})")
    return pd.DataFrame(rows, columns=['genome_id', 'gcf_id']).astype(str)


def load_gcf_assignments(path, taxonomy=None):
    """Load genome <-> GCF assignments from a TSV export or a BiG-SLiCE data.db.

    Genus comes from a genus column when the table has one, otherwise from the
    taxonomy table; anything unresolved is Unclassified.
    """
    if is_sqlite_file(path):
        df = load_gcf_assignments_db(path)
    else:
        df = pd.read_csv(path, sep='\t', dtype=str, keep_default_na=False)
        df = df.rename(columns={k: v for k, v in GCF_RENAMES.items() if k in df.columns})
        missing = [col for col in ('genome_id', 'gcf_id') if col not in df.columns]
        if missing:
            raise ValueError(f"{path}: missing required column(s) {', '.join(missing)}")

    df = df.copy()
    df['genome_id'] = df['genome_id'].str.strip()
    df['gcf_id'] = df['gcf_id'].str.strip()

    if 'genus' not in df.columns:
        df['genus'] = ''
    own = df['genus'].fillna('').astype(str).str.strip()
    if taxonomy is not None:
        # Taxonomy only fills rows the export left without a genus
        lookup = taxonomy.drop_duplicates(subset='accession').set_index('accession')['genus']
        joined = df['genome_id'].map(lookup).fillna('').astype(str).str.strip()
        own = own.where(own != '', joined)

    df['genus'] = own.replace('', UNCLASSIFIED)

    print(f"Loaded {len(df)} GCF assignments covering {df['gcf_id'].nunique()} GCFs")
    return df[['genome_id', 'gcf_id', 'genus']].reset_index(drop=True)
