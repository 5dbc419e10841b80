"""Firestore-backed services: development seeding and reset."""

from app.infrastructure.firebase.services.seed_firestore import (
    FirestoreSeedService,
    SeedResult,
    reset_seed_guard,
)

__all__ = ["FirestoreSeedService", "SeedResult", "reset_seed_guard"]
