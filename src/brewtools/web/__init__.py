"""Web boundary layer for the Brewit tool proxy.

This layer never executes transactions itself. Tool calls are validated
here and forwarded to the Brewit automation API, which does the work.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
