"""Delivery (legacy) API resources: services, versions and versioned config objects."""

from adapters.delivery import acl, acl_entry, backend, dictionary, dictionary_item, domain, service, version

__all__ = ["acl", "acl_entry", "backend", "dictionary", "dictionary_item", "domain", "service", "version"]
