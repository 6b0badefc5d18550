"""Import definitions used for metaprogramming."""

from .paths import COVERAGE_PATHS_ROOT as COVERAGE_PATHS_ROOT
from .paths import DEFAULT_PARAMS_PATH as DEFAULT_PARAMS_PATH
