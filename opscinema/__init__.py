"""Typed contracts, errors, canonical JSON, BLAKE3 hashing, export manifests,
TypeScript client generation and guarded shell verifiers for evidence-backed bundles."""

__version__ = "0.1.0"