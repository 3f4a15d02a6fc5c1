"""
Shared helpers: primitive validators and password hashing.
"""
