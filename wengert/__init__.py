# wengert/__init__.py
# Tape-based reverse-mode automatic differentiation for scalar expressions

from .config import TapeConfig, DEFAULT_CONFIG
from .errors import WengertError, TapeMismatchError, ZeroDivisorError, TapeOwnershipError
from .core.node import Node
from .core.tape import Tape
from .core.var import Var
from .core.engine import Gradient, gradient
from .core.seeds import grad, grads, grads_list, value, value_and_grad
from . import ops
from .ops import add, sub, mul, div, reciprocal, sqrt, sin, cos, exp, log

__version__ = "0.1.0"

__all__ = [
    # Core
    'Tape',
    'Node',
    'Var',
    'Gradient',
    'gradient',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'value_and_grad',
    # Operations
    'ops',
    'add', 'sub', 'mul', 'div', 'reciprocal',
    'sqrt', 'sin', 'cos', 'exp', 'log',
    # Config / errors
    'TapeConfig',
    'DEFAULT_CONFIG',
    'WengertError',
    'TapeMismatchError',
    'ZeroDivisorError',
    'TapeOwnershipError',
]
