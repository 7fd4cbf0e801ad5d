# Sensu Go subpackage: delivery service, route bindings and config holder
"""Init module."""
from . import config_store, diagnostics, errors, handler, payloads, routes, service, transport

__all__ = ["config_store", "diagnostics", "errors", "handler", "payloads", "routes", "service", "transport"]
