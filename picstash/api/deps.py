# picstash/api/deps.py
from fastapi import Request

from picstash.services.unsplash_service import UnsplashClient


def get_unsplash_client(request: Request) -> UnsplashClient:
    """Unsplash client created at startup"""
    return request.app.state.unsplash_client
