"""
Boundary layer.

Adapters for external systems (object storage, batch execution).
"""
