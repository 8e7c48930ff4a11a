"""
Core modules for canvasfilter.

This package contains the fundamental building blocks:
- types: Data structures (nodes, edges, snapshots)
- geometry: Rectangle containment
- query: Group and edge lookups over a snapshot
- session: Process-wide filter memory
- result: Ok/Err result type
"""
