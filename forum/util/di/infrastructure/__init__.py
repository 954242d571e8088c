"""Infrastructure providers.

Implementations must be imported here so that the component bases can find
them through __subclasses__().
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
