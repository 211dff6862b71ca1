# backend/modules/analytics/__init__.py

"""
Analytics Module - dashboard totals for orders, revenue and reservations.
"""
