"""
License Storefront Django project.
"""
