"""
Activations module - Installed seats of a license.

This module handles:
- Activation entity and persistence
- Listing and deleting a license's activations
- The live activation list shown on the product page
"""
