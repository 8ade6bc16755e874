"""Import classes and definitions for joint-level robot kinematics."""

from .joint_names import InvalidJointName as InvalidJointName
from .joint_names import find_joint_index as find_joint_index
from .joint_state import JointState as JointState
from .joint_state import JointStateField as JointStateField
from .joints import Joints as Joints
