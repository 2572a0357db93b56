"""Shared constants for the Cyanobacteriota BGC analysis pipeline."""

# The seven coarse BGC categories, in the order used for legends
BGC_CATEGORIES = [
    'Polyketide',
    'NRP',
    'RiPP',
    'Terpene',
    'Saccharide',
    'Alkaloid',
    'Other',
]

# Category colors (antiSMASH-inspired families, see BGC class palette)
CATEGORY_COLORS = {
    'Polyketide': '#1f77b4',   # Blue
    'NRP': '#d62728',          # Red
    'RiPP': '#27ae60',         # Green
    'Terpene': '#f39c12',      # Orange-yellow
    'Saccharide': '#a0522d',   # Sienna brown
    'Alkaloid': '#008080',     # Teal
    'Other': '#95a5a6',        # Gray
    'NRP, Polyketide': '#9b59b6',  # Purple (PKS/NRPS hybrids)
    'All other hybrids': '#bdc3c7',
}

# Palette for lumped groups that have no dedicated color
GROUP_COLORS = [
    '#e41a1c',
    '#377eb8',
    '#4daf4a',
    '#984ea3',
    '#ff7f00',
    '#a65628',
    '#f781bf',
    '#66c2a5',
    '#fc8d62',
    '#8da0cb',
    '#e78ac3',
    '#a6d854',
    '#ffd92f',
    '#e5c494',
]

# Lumping of rare category combinations
LUMP_THRESHOLD = 80
LUMPED_LABEL = 'All other hybrids'
ALWAYS_DISTINCT = 'NRP, Polyketide'
COMBINATION_SEPARATOR = ', '

# Sentinel for assemblies without a genus assignment
UNCLASSIFIED = 'Unclassified'

# NCBI assembly levels kept by the quality filter
HIGH_QUALITY_LEVELS = ('Complete', 'Chromosome')

# Scaffold-count cutoffs evaluated against the assembly-level filter
SCAFFOLD_THRESHOLDS = (10, 20, 25, 30, 50, 100)

LINEAGE_RANKS = ['superkingdom', 'phylum', 'class', 'order', 'family', 'genus', 'species']

# antiSMASH 7 class vocabulary -> BGC category
DEFAULT_CLASS_CATEGORIES = {
    # Polyketides
    'T1PKS': 'Polyketide',
    'T2PKS': 'Polyketide',
    'T3PKS': 'Polyketide',
    'transAT-PKS': 'Polyketide',
    'transAT-PKS-like': 'Polyketide',
    'PKS-like': 'Polyketide',
    'hglE-KS': 'Polyketide',
    'arylpolyene': 'Polyketide',
    'resorcinol': 'Polyketide',
    'ladderane': 'Polyketide',
    'PUFA': 'Polyketide',
    'prodigiosin': 'Polyketide',

    # Non-ribosomal peptides
    'NRPS': 'NRP',
    'NRPS-like': 'NRP',
    'thioamide-NRP': 'NRP',
    'NAPAA': 'NRP',
    'NRP-metallophore': 'NRP',
    'isocyanide-nrp': 'NRP',

    # RiPPs
    'RiPP-like': 'RiPP',
    'RRE-containing': 'RiPP',
    'lanthipeptide-class-i': 'RiPP',
    'lanthipeptide-class-ii': 'RiPP',
    'lanthipeptide-class-iii': 'RiPP',
    'lanthipeptide-class-iv': 'RiPP',
    'lanthipeptide-class-v': 'RiPP',
    'lassopeptide': 'RiPP',
    'LAP': 'RiPP',
    'thiopeptide': 'RiPP',
    'sactipeptide': 'RiPP',
    'bottromycin': 'RiPP',
    'cyanobactin': 'RiPP',
    'microviridin': 'RiPP',
    'proteusin': 'RiPP',
    'ranthipeptide': 'RiPP',
    'redox-cofactor': 'RiPP',
    'thioamitides': 'RiPP',
    'epipeptide': 'RiPP',
    'guanidinotides': 'RiPP',
    'glycocin': 'RiPP',
    'linaridin': 'RiPP',
    'lipolanthine': 'RiPP',
    'methanobactin': 'RiPP',
    'triceptide': 'RiPP',
    'spliceotide': 'RiPP',
    'darobactin': 'RiPP',
    'crocagin': 'RiPP',
    'rcdps': 'RiPP',
    'fungal-RiPP': 'RiPP',
    'atropopeptide': 'RiPP',

    # Terpenes
    'terpene': 'Terpene',
    'terpene-precursor': 'Terpene',

    # Saccharides
    'amglyccycl': 'Saccharide',
    'oligosaccharide': 'Saccharide',
    'saccharide': 'Saccharide',

    # Alkaloids
    'indole': 'Alkaloid',
    'pyrrolidine': 'Alkaloid',

    # Everything else
    'betalactone': 'Other',
    'blactam': 'Other',
    'butyrolactone': 'Other',
    'CDPS': 'Other',
    'hydrogen-cyanide': 'Other',
    'ectoine': 'Other',
    'furan': 'Other',
    'hserlactone': 'Other',
    'melanin': 'Other',
    'nucleoside': 'Other',
    'NI-siderophore': 'Other',
    'opine-like-metallophore': 'Other',
    'phenazine': 'Other',
    'phosphoglycolipid': 'Other',
    'phosphonate': 'Other',
    'aminocoumarin': 'Other',
    'acyl_amino_acids': 'Other',
    'NAGGN': 'Other',
    '2dos': 'Other',
    'aminopolycarboxylic-acid': 'Other',
    'azoxy-crosslink': 'Other',
    'azoxy-dimer': 'Other',
    'cyclic-lactone-autoinducer': 'Other',
    'deazapurine': 'Other',
    'isocyanide': 'Other',
    'nitropropanoic-acid': 'Other',
    'other': 'Other',
}
