"""Persistent store adapters.

Adapters import their database libraries at module import time, so they
are not re-exported here. Import them from their own modules:

    from cacheaside.infrastructure.stores.sqlalchemy_store import (
        SqlAlchemyStoreAdapter,
    )
"""
