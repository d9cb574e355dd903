"""
HTTP application for the campus service
"""
