from typedcalc.types.cons import Cons
from typedcalc.types.nil import NullType
from typedcalc.types.symbol import Symbol

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_depth": 5,
    "max_items": 32,
}


# ----------------- Value rendering -----------------
def format_value(value, options: dict = DEFAULT_OPTIONS, _depth: int = 0) -> str:
    """Render a TypedValue for messages and the REPL-style __str__."""
    if value.is_(NullType):
        return "null"
    if value.is_(Symbol):
        return f"'{value.value}"
    if value.is_(str):
        return repr(value.value)
    if value.is_(bool):
        return "true" if value.value else "false"
    if value.is_(Cons):
        if _depth >= options.get("max_depth", 5):
            return "(...)"
        return _format_cons(value.unwrap(Cons), options, _depth + 1)
    from typedcalc.compiler.code import Code
    if value.is_(Code):
        return "{" + format_code(value.value) + "}"
    return str(value.value)


def _format_cons(cell: Cons, options: dict, depth: int) -> str:
    limit = options.get("max_items", 32)
    parts = []
    for index, (element, _) in enumerate(cell.linear()):
        if index >= limit:
            parts.append("...")
            break
        parts.append(format_value(element, options, depth))
    terminator = cell.terminator()
    if not terminator.is_(NullType):
        parts.extend([".", format_value(terminator, options, depth)])
    return "(" + " ".join(parts) + ")"


# ----------------- Code listing -----------------
def format_code(code) -> str:
    return " ".join(_format_step(step) for step in code)


def _format_step(step) -> str:
    from typedcalc.compiler.executables import SymbolCall, SymbolGet, Value
    if isinstance(step, Value):
        return format_value(step.value)
    if isinstance(step, SymbolGet):
        return step.name
    if isinstance(step, SymbolCall):
        return f"{step.name}${step.args},{step.returns}"
    return repr(step)
