"""Core constants: user-facing store messages and shared literal values."""

# Shown by live stores when a listener fails with permission-denied
PERMISSION_DENIED_MESSAGE = (
    "Missing or insufficient permissions. Check the Firestore security rules "
    "for this collection, or sign in with an account that has access."
)

# Fallback store error, formatted with the entity's plural label
LOAD_FAILED_MESSAGE = "Failed to load {entity}."

# Guest request submission limit (slowapi syntax)
RATE_LIMIT_GUEST_REQUESTS = "10/minute"

# Services per page when GET /services is paged without page_size
DEFAULT_PAGE_SIZE = 10
