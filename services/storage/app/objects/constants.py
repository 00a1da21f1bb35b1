"""
Object API — static constants.
"""

# Origin uploads land here; the resize Lambda is subscribed to this prefix.
UPLOAD_PREFIX = "uploads/"

# ListObjectsV2 bounds
DEFAULT_LIST_PREFIX = UPLOAD_PREFIX
DEFAULT_MAX_KEYS = 100
MAX_LIST_KEYS = 1000
