from typing import Dict, TypeAlias

import numpy as np
from numpy.typing import NDArray

Values: TypeAlias = NDArray[np.float64]
DateAxis: TypeAlias = NDArray[np.datetime64]

ComponentId: TypeAlias = int
OptionValues: TypeAlias = Dict[str, float]
