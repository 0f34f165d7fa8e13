from typedcalc.types.symbol import Symbol
from typedcalc.types.nil import Null, NullType
from typedcalc.types.domain import TypeDomain, TypedValue
from typedcalc.types.cons import Cons
from typedcalc.types.scope import Scope

__all__ = ["Symbol", "Null", "NullType", "TypeDomain", "TypedValue", "Cons", "Scope"]
