"""Mock microservices for exercising CI/CD pipeline gates."""

__version__ = "1.0.0"
