"""colour-matrix — preview a 4x5 colour matrix applied to RGBA images."""

__version__ = '0.1.0'
