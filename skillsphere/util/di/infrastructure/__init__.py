"""Infrastructure providers.

Implementations are imported here so that ``get_provider`` finds them
through ``PersistenceProvider.__subclasses__()``.
"""

from skillsphere.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
