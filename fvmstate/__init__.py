"""State types, proof tables, big integers and deal structures for the Filecoin virtual machine."""

__version__ = "0.1.0"

__all__ = [
    "abi",
    "actors",
    "address",
    "bigint",
    "cborutil",
    "cid",
    "deal",
    "market_policy",
    "market_state",
    "methods",
    "network",
    "piece",
    "proof_policy",
    "sector",
]