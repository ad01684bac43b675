
from .api import Interpreter, RunOptions, RunResult, execute, parse_string, run_file, run_string
from .errors import BFError, InputExhaustedError, UnbalancedLoopError
from .evaluator import Evaluator
from .lexer import Op, tokenize
from .structurer import build
from .tape import Tape
from .validator import validate

__all__ = [
    'Interpreter',
    'RunOptions',
    'RunResult',
    'execute',
    'parse_string',
    'run_string',
    'run_file',
    'BFError',
    'UnbalancedLoopError',
    'InputExhaustedError',
    'Evaluator',
    'Op',
    'tokenize',
    'build',
    'Tape',
    'validate',
]
