"""Error types raised by the config builders."""


class StoreError(RuntimeError):
    """A query against the relational store failed."""


class InvalidArgumentError(ValueError):
    """A caller passed an argument the operation cannot work with."""
