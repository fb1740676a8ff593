"""CLI sub-commands, one per module; see colour_matrix.registry."""
