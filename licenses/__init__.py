"""
Licenses module - Viewer entitlements.

This module handles:
- License entity and persistence
- Resolving which licenses or purchases a viewer holds for a product
"""
