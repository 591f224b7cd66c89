"""Questlines — CRUD backend for quest dependency graphs.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
