import math
import sys
from typing import Final

# Relative tolerance used by kernel equality (Vec.eq, third-row check).
EPSILON: Final[float] = 1e-12

# Absolute floor for kernel equality, so values next to zero still compare equal.
DBL_EPSILON: Final[float] = sys.float_info.epsilon

# Implicit third row of every affine matrix.
AFFINE_ROW: Final[tuple] = (0.0, 0.0, 1.0)

TAU: Final[float] = math.tau

DEGREES_PER_TURN: Final[float] = 360.0
GRADIANS_PER_TURN: Final[float] = 400.0
