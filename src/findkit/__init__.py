"""findkit: standalone helper routines.

The package bundles small leaf utilities: a fast random letter-string
generator, raw DEFLATE buffer compression, leveled log handles, local LAN
address discovery, content hashing and basic descriptive statistics.  The
command line interface lives in :mod:`findkit.cli`.
"""

from .codec import compress, compress_bytes, decompress, decompress_bytes
from .hashing import md5_hex
from .netaddr import get_local_ip
from .randstr import RandomStringGenerator, rand_string
from .stats import average, standard_deviation, standard_deviation32

__version__ = "0.1.0"

__all__ = [
    "RandomStringGenerator",
    "average",
    "compress",
    "compress_bytes",
    "decompress",
    "decompress_bytes",
    "get_local_ip",
    "md5_hex",
    "rand_string",
    "standard_deviation",
    "standard_deviation32",
]
