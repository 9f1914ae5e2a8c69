from .vector2 import Vector2
from .vector3 import Vector3, Vector3Pos
from .vectorn import VectorN
