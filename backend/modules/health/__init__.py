"""
Health check endpoints: service status and database connectivity.
"""
