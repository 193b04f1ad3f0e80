"""Configuration management for the feedback UI.

Handles backend URL, API endpoint and timeout.
"""
import os

# Backend base URL - defaults to the API's default local port
BACKEND_BASE_URL: str = os.getenv("BACKEND_BASE_URL", "http://localhost:3000")

# API endpoint path for feedback requests
API_FEEDBACK_ENDPOINT: str = os.getenv("API_FEEDBACK_ENDPOINT", "/feedback")

# HTTP request timeout in seconds
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "10"))
