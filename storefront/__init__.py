"""
Storefront module - Server-rendered product pages.

This module handles:
- Product index and detail pages
- Activation list fragments used by the detail page
"""
