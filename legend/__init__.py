__all__ = [
    "__version__",
    "Expression",
    "Options",
    "RNG",
    "RollResult",
    "ParseExpressionError",
    "execute",
    "parse",
    "roll",
]
__version__ = "0.1.0"

from .errors import ParseExpressionError
from .expression import Expression, parse
from .output import RollResult
from .rng import RNG
from .roller import Options, execute, roll
