"""Game domain services: similarity, scoring, word bank, roles and rounds.

This package contains pure domain logic that the socket handlers and HTTP
routes call into, keeping transport concerns separated from the game
mechanics.
"""
