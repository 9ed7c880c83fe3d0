# Value objects
from .cart_snapshot import CartSnapshot, SnapshotLine

__all__ = ['CartSnapshot', 'SnapshotLine']
