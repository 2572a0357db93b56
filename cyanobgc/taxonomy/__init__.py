"""Loaders for taxonomy, assembly and BGC region tables."""
