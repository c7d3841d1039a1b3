"""Chirp aggregate service."""

from .dto import ChirpCreateIn, ChirpOut
from .profanity import clean_profanity
from .service import ChirpService

__all__ = ["ChirpCreateIn", "ChirpOut", "ChirpService", "clean_profanity"]
