"""
Business services. Routers call these; services call repositories.
"""
