"""Application layer: contracts, dependency context and the planning use-case."""
