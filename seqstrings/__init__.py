"""String algorithms for DNA sequences: tries, KMP, Burrows-Wheeler transform, suffix arrays and suffix trees."""

__version__ = "0.1.0"