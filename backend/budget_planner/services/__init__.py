"""
Service layer: record store, derivation and advice.
"""
