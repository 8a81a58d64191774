"""RooSearch — semantic code search over a workspace's Qdrant index."""

__version__ = "0.1.0"
