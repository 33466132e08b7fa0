"""
SxyzJsnx API: health check and static pages behind CORS, rate limiting and Swagger docs.
"""

__version__ = "1.0.0"
