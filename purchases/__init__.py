"""
Purchases module - Completed checkouts.

This module handles:
- Purchase entity and persistence
- The one-time post-checkout confirmation
"""
