"""Per-endpoint request builders for the catalog and authorization APIs."""
