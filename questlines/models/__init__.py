"""ORM Models — SQLAlchemy declarative models for the questline aggregate.

Invariants:
    - All models inherit from Base (db/base.py)
    - Questline is the aggregate root; every child row carries questline_id

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from questlines.models.questline import Questline  # noqa: F401
from questlines.models.quest import Quest  # noqa: F401
from questlines.models.objective import Objective  # noqa: F401
from questlines.models.dependency import Dependency  # noqa: F401
