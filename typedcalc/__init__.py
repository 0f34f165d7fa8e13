# Core type aliases for typedcalc's data model.
# Every runtime datum is a TypedValue (see typedcalc.types.domain); CalcValue
# names that in annotations without forcing an import cycle.

from typing import Any

# Runtime value alias
CalcValue = Any

from typedcalc.environment import Environment, create_environment  # noqa: E402

__all__ = ["CalcValue", "Environment", "create_environment"]
