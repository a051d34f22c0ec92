"""
Core utilities: exceptions, logging, security, permissions and middlewares.
"""
