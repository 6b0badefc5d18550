"""Import classes and functions for trimming and sequencing coverage path segments."""

from .margins import MarginComputationError as MarginComputationError
from .margins import apply_margin as apply_margin
from .margins import apply_margins as apply_margins
from .pipeline import PostprocessingConfig as PostprocessingConfig
from .pipeline import postprocess_segments as postprocess_segments
from .pipeline import travel_distance_m as travel_distance_m
from .reference_frame import EndpointRecord as EndpointRecord
from .reference_frame import longest_segment_index as longest_segment_index
from .reference_frame import project_endpoints as project_endpoints
from .reference_frame import reference_orientation as reference_orientation
from .segment import PathSegment as PathSegment
from .sequencing import SequenceStep as SequenceStep
from .sequencing import plan_sequence as plan_sequence
from .sequencing import sequence as sequence
from .sequencing import sort_endpoints as sort_endpoints
