"""Console browser for surveys, questions and weighted answers, with response records and value checks."""

__version__ = "0.1.0"