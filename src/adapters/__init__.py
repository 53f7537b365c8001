"""SDK layer: adapters over the management API (HTTP client, resources, products)."""
