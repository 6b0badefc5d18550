"""Import classes and definitions representing 3D coordinate frames, poses, and rotations."""

from .averaging import average_quaternions as average_quaternions
from .distances import euclidean_distance_3d_m as euclidean_distance_3d_m
from .frames import DEFAULT_FRAME as DEFAULT_FRAME
from .poses import Pose3D as Pose3D
from .poses import interpolate_position as interpolate_position
from .rotations import HALF_TURN_ABOUT_Z as HALF_TURN_ABOUT_Z
from .rotations import EulerRPY as EulerRPY
from .rotations import Quaternion as Quaternion
