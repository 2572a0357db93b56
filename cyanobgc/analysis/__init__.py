"""Classification, quality filtering and aggregation of BGC regions."""
