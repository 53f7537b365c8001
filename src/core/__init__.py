"""Core layer: configuration, errors, domain models and the request codec."""
