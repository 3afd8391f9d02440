"""
application - Use cases built on the domain ports.
"""
