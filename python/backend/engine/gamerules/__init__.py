from backend.engine.gamerules.rules import (
    can_roll_one_die,
    is_available,
    remove_with_dependents,
)

__all__ = ["can_roll_one_die", "is_available", "remove_with_dependents"]
