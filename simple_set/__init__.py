from .hash_set import (
    HashSet as HashSet,
    UnhashableElementError as UnhashableElementError,
)
