"""Adapters — Discord client and gRPC endpoint implementations of the ports."""
