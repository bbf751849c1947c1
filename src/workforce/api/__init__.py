"""
HTTP application for Workforce API
"""
