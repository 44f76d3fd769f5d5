"""Registry of supported digest algorithms.

Every algorithm is a pure function from bytes to bytes, delegated to
hashlib or pycryptodome. The registry is built once at import time and is
never modified afterwards.
"""

import hashlib
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from Crypto.Hash import RIPEMD160, SHA512, keccak

DigestFunction = Callable[[bytes], bytes]


@dataclass(frozen=True)
class Algorithm:
    """A named digest function with its help label."""

    name: str
    help: str
    digest: DigestFunction


def md5(data: bytes) -> bytes:
    return hashlib.md5(data).digest()


def sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def sha2_224(data: bytes) -> bytes:
    return hashlib.sha224(data).digest()


def sha2_256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha2_384(data: bytes) -> bytes:
    return hashlib.sha384(data).digest()


def sha2_512(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


# hashlib only offers SHA-512/t when OpenSSL provides it
def sha2_512_224(data: bytes) -> bytes:
    return SHA512.new(data, truncate="224").digest()


def sha2_512_256(data: bytes) -> bytes:
    return SHA512.new(data, truncate="256").digest()


def sha3_224(data: bytes) -> bytes:
    return hashlib.sha3_224(data).digest()


def sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def sha3_384(data: bytes) -> bytes:
    return hashlib.sha3_384(data).digest()


def sha3_512(data: bytes) -> bytes:
    return hashlib.sha3_512(data).digest()


def _keccak(bits: int) -> DigestFunction:
    """Build a Keccak digest function (pre-standard padding, as used by Ethereum)."""

    def digest(data: bytes) -> bytes:
        return keccak.new(data=data, digest_bits=bits).digest()

    digest.__name__ = f"sha3_k_{bits}"
    return digest


sha3_k_224 = _keccak(224)
sha3_k_256 = _keccak(256)
sha3_k_384 = _keccak(384)
sha3_k_512 = _keccak(512)


def ripemd_160(data: bytes) -> bytes:
    return RIPEMD160.new(data).digest()


class AlgorithmRegistry:
    """
    Ordered, read-only lookup table of algorithms.

    Iteration follows registration order, which is also the order used in
    generated help text. Lookup is by exact, case-sensitive name.
    """

    def __init__(self, algorithms: Iterable[Algorithm]):
        """
        Build the registry.

        Args:
            algorithms: Algorithms in display order

        Raises:
            ValueError: If two algorithms share a name
        """
        self._algorithms = tuple(algorithms)
        self._by_name: dict[str, Algorithm] = {}

        for algorithm in self._algorithms:
            if algorithm.name in self._by_name:
                raise ValueError(f"Duplicate algorithm name: {algorithm.name}")
            self._by_name[algorithm.name] = algorithm

    def get(self, name: str) -> Algorithm | None:
        """Return the algorithm registered as name, or None."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [algorithm.name for algorithm in self._algorithms]

    def help_text(self) -> str:
        """
        Describe every algorithm, one per line.

        Returns:
            "Hash algorithm" followed by "<name>: <help>" lines
        """
        lines = [f"{a.name}: {a.help}" for a in self._algorithms]
        return "Hash algorithm\n" + "\n".join(lines)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Algorithm]:
        return iter(self._algorithms)

    def __len__(self) -> int:
        return len(self._algorithms)


REGISTRY = AlgorithmRegistry(
    [
        Algorithm("md5", "MD5", md5),
        Algorithm("sha1", "SHA-1", sha1),
        Algorithm("sha2_224", "SHA-2 224", sha2_224),
        Algorithm("sha2_256", "SHA-2 256", sha2_256),
        Algorithm("sha2_384", "SHA-2 384", sha2_384),
        Algorithm("sha2_512", "SHA-2 512", sha2_512),
        Algorithm("sha2_512_224", "SHA-2 512 truncate 224", sha2_512_224),
        Algorithm("sha2_512_256", "SHA-2 512 truncate 256", sha2_512_256),
        Algorithm("sha3_224", "SHA-3 224", sha3_224),
        Algorithm("sha3_256", "SHA-3 256", sha3_256),
        Algorithm("sha3_384", "SHA-3 384", sha3_384),
        Algorithm("sha3_512", "SHA-3 512", sha3_512),
        Algorithm("sha3_k_224", "SHA-3 keccak 224", sha3_k_224),
        Algorithm("sha3_k_256", "SHA-3 keccak 256", sha3_k_256),
        Algorithm("sha3_k_384", "SHA-3 keccak 384", sha3_k_384),
        Algorithm("sha3_k_512", "SHA-3 keccak 512", sha3_k_512),
        Algorithm("ripemd_160", "RIPEMD-160", ripemd_160),
    ]
)
