"""
Internship Portal
A two-sided internship marketplace API.

Architecture:
- PostgreSQL: users, student profiles, startups, internships, applications
- FastAPI: JSON API mounted under /api
- client: Python gateway for the API (identity header, 401 handling)
"""

__version__ = "1.0.0"
