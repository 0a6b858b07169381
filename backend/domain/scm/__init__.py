"""
SCM Domain - Supply chain management.

This domain handles the companies we buy from:
- Suppliers with their identifier, name and postal address
"""
