"""Import definitions describing the process tool and its parameters."""

from .process_tool import ProcessTool as ProcessTool
from .process_tool import blend_tool as blend_tool
from .process_tool import postprocessing_config as postprocessing_config
from .process_tool import scan_tool as scan_tool
