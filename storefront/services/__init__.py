from storefront.services.auth import (
    DEMO_ADMIN_EMAIL,
    DEMO_ADMIN_NAME,
    DEMO_ADMIN_PASSWORD,
    demo_login_form,
    hash_password,
    verify_password,
)
from storefront.services.bulk_store import (
    BulkLoadMode,
    BulkStore,
    SqlAlchemyBulkStore,
    bulk_load,
)
from storefront.services.progress import LoggingProgress, ProgressReporter
from storefront.services.storage import PublicStorage

__all__ = [
    # auth
    "DEMO_ADMIN_EMAIL",
    "DEMO_ADMIN_NAME",
    "DEMO_ADMIN_PASSWORD",
    "demo_login_form",
    "hash_password",
    "verify_password",
    # bulk store
    "BulkLoadMode",
    "BulkStore",
    "SqlAlchemyBulkStore",
    "bulk_load",
    # progress
    "LoggingProgress",
    "ProgressReporter",
    # storage
    "PublicStorage",
]
