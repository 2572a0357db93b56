"""BiG-SLiCE clustering results."""
