"""CSV ingestion stage.

This package lists input CSV files, parses their data lines, and
builds the per-company aggregation table.
"""
