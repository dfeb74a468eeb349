"""Fitness dashboard core: provider connections, activity classification and training metrics."""
