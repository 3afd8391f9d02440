"""
domain - Entities, ports and exceptions.

No SQL, no HTTP. Everything else in the package depends on this layer.
"""
