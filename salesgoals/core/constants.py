"""
Service metadata constants
"""
SERVICE_NAME = "sales-goals-backend"
DEFAULT_VERSION = "1.0.0"
