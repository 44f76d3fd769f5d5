"""Algorithm registry and dispatch."""

from hexhash.core.algorithms import REGISTRY, Algorithm, AlgorithmRegistry
from hexhash.core.dispatcher import digest, hash_command

__all__ = ["Algorithm", "AlgorithmRegistry", "REGISTRY", "digest", "hash_command"]
