"""Core domain: models, ports and the enrichment pipeline."""
