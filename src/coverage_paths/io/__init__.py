"""Import classes and definitions used for input/output, configuration, and logging."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .logging import log_debug as log_debug
from .logging import log_error as log_error
from .logging import log_info as log_info
from .logging import log_warning as log_warning
from .pydantic_schemata import ProcessPlanningParamsSchema as ProcessPlanningParamsSchema
from .pydantic_schemata import load_process_planning_params as load_process_planning_params
from .yaml_utils import load_yaml_data as load_yaml_data
