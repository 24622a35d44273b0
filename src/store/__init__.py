"""Output layer.

This package writes the finished aggregation table as one sorted
CSV file per insurance company.
"""
