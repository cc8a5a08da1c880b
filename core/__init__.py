"""
Core package - Shared utilities used across adapters and services.
"""
