from __future__ import annotations


class SchemaBuildError(RuntimeError):
    # Fatal: the wiring or the executable schema could not be assembled.
    pass


class DiscoveryError(SchemaBuildError):
    # Raised when the base package (or a module below it) cannot be imported.
    pass
