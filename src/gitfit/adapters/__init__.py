"""
adapters - Entry points (REST API, CLI) that drive the ServiceFactory.
"""
