"""RPC adapters — gRPC client for the song-management service."""

from itg_buddy.adapters.rpc.endpoint import ItgEndpoint, normalize_target

__all__ = ["ItgEndpoint", "normalize_target"]
