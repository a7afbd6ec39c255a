"""Configuration settings for the wellness clinic admin interface."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration from environment variables."""

    # Remote services
    CLIENT_SERVICE_URL: str = os.getenv('CLIENT_SERVICE_URL', 'http://localhost:8081').rstrip('/')
    APPOINTMENT_SERVICE_URL: str = os.getenv('APPOINTMENT_SERVICE_URL', 'http://localhost:8082').rstrip('/')

    # Server Configuration
    HOST: str = os.getenv('HOST', 'localhost')
    PORT: int = int(os.getenv('PORT', '5000'))
    SECRET_KEY: str = os.getenv('SECRET_KEY', 'dev-secret-key')

    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE: str = os.getenv('LOG_FILE', '')


config = Config()
