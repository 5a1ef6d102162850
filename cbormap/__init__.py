"""CBOR map items with definite and indefinite storage, in ``cbormap.maps``."""

__version__ = "0.11.0"
__all__ = ["maps"]