"""
Products module - Storefront catalog.

This module handles:
- Product and Purchasable entities
- Media attached to products
- Reading the catalog for display
"""
