"""
Infrastructure layer: relational stores and logging setup.
"""
