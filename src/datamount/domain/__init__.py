"""Domain layer for datamount.

Contains the `DataSize` value object, its units, the capacity checks built on
it and the errors they raise. Pure and technology-agnostic.

Dependency rule: do not import from `datamount.entrypoints`, `datamount.config`
or `datamount.logging`.
"""
