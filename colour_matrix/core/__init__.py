"""colour_matrix.core — Foundation layer.

Contains the matrix types, the matrix parser, the pixel transformer, the
matrix editor, Pillow glue, report builder and .env settings.
This module has NO dependencies on colour_matrix.commands or colour_matrix.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
