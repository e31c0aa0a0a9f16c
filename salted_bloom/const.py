# ==================================================
# salted_bloom/const.py
# ==================================================
import os

MAX_HASH_FUNCS     = 100     # upper bound of the k search in sizing
BLANK_VECTOR       = 0       # XOR identity the cell fold starts from
WORD_FMT           = ">I"    # digest words: big-endian uint32
DEFAULT_ERROR_RATE = 0.01

# process-wide digest override, e.g. SALTED_BLOOM_DIGEST=xxh128
DEFAULT_DIGEST = os.getenv("SALTED_BLOOM_DIGEST", "sha1")
