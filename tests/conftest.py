import os
import sys

import numpy as np
import pytest

# Shared helpers (samples.py) live next to this file.
TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
if TESTS_DIR not in sys.path:
    sys.path.insert(0, TESTS_DIR)


INTEGER_DTYPES = [np.uint8, np.uint16, np.uint32, np.uint64, np.int8, np.int16, np.int32, np.int64]
FLOAT_DTYPES = [np.float32, np.float64]


@pytest.fixture(params=INTEGER_DTYPES, ids=lambda d: np.dtype(d).name)
def integer_dtype(request):
    return np.dtype(request.param)


@pytest.fixture(params=FLOAT_DTYPES, ids=lambda d: np.dtype(d).name)
def float_dtype(request):
    return np.dtype(request.param)
