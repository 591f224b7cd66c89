"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter; main.py mounts it under the API prefix
    - Routes never contain persistence logic (delegate to the repository)
"""
