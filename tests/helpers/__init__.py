"""Shared helpers for STOREFRONT tests."""
