"""Console rendering of models and catalog listings."""
