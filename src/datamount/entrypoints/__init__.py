"""Entrypoints (inbound adapters) for DATAMOUNT.

Expose the domain to the outside world: currently the ``datamount`` CLI.
Parse and validate inputs, call the domain, and present results.
"""
