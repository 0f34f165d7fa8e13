import pytest

from typedcalc import create_environment
from typedcalc.compiler import SymbolCallNode, SymbolGetNode, ValueNode
from typedcalc.evaluation.callable import BinaryFunction, FixedCallable

# Shared fixtures: a fresh environment with the core built-ins plus a couple of
# host-side helpers ("tick" counts its own invocations, "add" sums two ints).


class Counter(FixedCallable):
    def __init__(self, domain):
        super().__init__(0, 1)
        self.domain = domain
        self.count = 0

    def invoke(self, frame):
        self.count += 1
        frame.stack.push(self.domain.create(int, self.count))


class Add(BinaryFunction):
    def apply(self, left, right):
        return left.domain.create(int, left.as_(int, "left operand") + right.as_(int, "right operand"))


@pytest.fixture
def env():
    env = create_environment()
    env.set_global_symbol("add", Add())
    return env


@pytest.fixture
def domain(env):
    return env.domain


@pytest.fixture
def counter(env):
    c = Counter(env.domain)
    env.set_global_symbol("tick", c)
    return c


# -----------------------------------------------------
# Node helpers
# -----------------------------------------------------

def val(env, payload):
    return ValueNode(env.value(payload))


def get(name):
    return SymbolGetNode(name)


def call(name, *args):
    return SymbolCallNode(name, args)


def run(env, node):
    """Evaluate `node` and return the payloads left on the stack."""
    return [v.value for v in env.evaluate(node)]


def define(env, name, node):
    """Evaluate `node` to a single value and bind it globally as `name`."""
    [value] = env.evaluate(node)
    env.set_global_symbol(name, value)
    return value
