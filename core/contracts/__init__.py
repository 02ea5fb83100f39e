"""core.contracts

Central, stable interfaces (ABCs) between the host application and features.

Design goals:
- Features depend on contracts, not on concrete host implementations.
- The host validates integration by implementing these ABCs.

This package intentionally contains only interfaces and shared type definitions.
"""
