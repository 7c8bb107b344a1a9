"""Registry data models — schemas, catalog entries, results and conversions."""
