"""Record transforms applied during ingestion."""
