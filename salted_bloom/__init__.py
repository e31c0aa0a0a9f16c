from .bloom   import BloomFilter
from .cells   import get_cells
from .digest  import key_to_bytes
from .errors  import BloomError, CapacityExceeded, InvalidParameters
from .locked  import LockedBloomFilter
from .salts   import create_salts
from .sizing  import calculate_filter_parameters

__all__ = ["BloomFilter", "LockedBloomFilter", "calculate_filter_parameters",
           "create_salts", "get_cells", "key_to_bytes",
           "BloomError", "CapacityExceeded", "InvalidParameters"]
