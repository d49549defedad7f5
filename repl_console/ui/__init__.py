"""Console widgets and themes."""
