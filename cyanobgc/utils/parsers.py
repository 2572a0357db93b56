#!/usr/bin/env python3
"""Shared parsing utilities for the BGC analysis pipeline."""

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RawClassField:
    """A BGC class annotation as found in the region table.

    Attributes:
        kind: 'list' when the field held a JSON array, 'single' otherwise.
        labels: class names in their original order.
    """

    kind: str
    labels: tuple


def parse_class_field(raw):
    """Parse a raw class field into a tagged RawClassField.

    A leading '[' marks a JSON list of class names; anything else is taken
    as one class name.
    """
    text = str(raw).strip()
    if not text:
        raise ValueError("Empty BGC class field")
    if text.startswith('['):
        try:
            labels = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed BGC class list {text!r}: {e}") from e
        if not isinstance(labels, list):
            raise ValueError(f"BGC class list {text!r} is not a JSON array")
        if not labels:
            raise ValueError(f"BGC class list {text!r} is empty")
        return RawClassField('list', tuple(str(label).strip() for label in labels))
    return RawClassField('single', (text,))


def normalize_assembly_level(level):
    """Map NCBI assembly level strings onto Complete/Chromosome/Scaffold/Contig."""
    if level is None:
        return None
    text = str(level).strip()
    if not text or text.lower() == 'nan':
        return None
    lowered = text.lower()
    if lowered.startswith('complete'):
        return 'Complete'
    if lowered.startswith('chromosome'):
        return 'Chromosome'
    if lowered.startswith('scaffold'):
        return 'Scaffold'
    if lowered.startswith('contig'):
        return 'Contig'
    return text


def parse_bool(value):
    """Parse contig-edge style flags (True/False, 1/0, yes/no)."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('true', 't', '1', 'yes', 'y'):
        return True
    if text in ('false', 'f', '0', 'no', 'n', '', 'nan'):
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean flag")


def read_accession_list(path):
    """Read one accession per line, skipping blanks and '#' comments."""
    accessions = []
    seen = set()
    with open(path, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            # Lists exported from tables may carry extra columns
            accession = line.split('\t')[0].strip()
            if accession not in seen:
                seen.add(accession)
                accessions.append(accession)
    return accessions


def is_sqlite_file(path):
    """True when path looks like a SQLite database (BiG-SLiCE data.db)."""
    path = Path(path)
    if path.suffix in ('.db', '.sqlite'):
        return True
    try:
        with open(path, 'rb') as f:
            return f.read(16) == b'SQLite format 3\x00'
    except OSError:
        return False
