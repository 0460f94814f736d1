"""Field roles.

A template field's role decides which transform turns the catalog value
into a name token. Roles are derived from the logical field name only,
never from the field's position in the template.
"""

from enum import Enum
from functools import lru_cache


class FieldRole(Enum):
    """Semantic role of a template field."""
    MATERIAL = "material"
    FINISH = "finish"
    LENGTH = "length"
    SCREW_SIZE = "screw_size"
    DIMENSION = "dimension"
    THREAD_SIZE = "thread_size"
    DEFAULT = "default"


@lru_cache(maxsize=None)
def role_for(field_name: str) -> FieldRole:
    """
    Classify a logical field name.

    Checked in order: material, finish, length, screw size, other
    dimensions, thread size, then DEFAULT.
    """
    name = field_name.strip().lower()

    if _is_material(name):
        return FieldRole.MATERIAL
    if name == "finish":
        return FieldRole.FINISH
    if name == "length":
        return FieldRole.LENGTH
    if name == "for screw size":
        return FieldRole.SCREW_SIZE
    if _is_dimension(name):
        return FieldRole.DIMENSION
    if _is_thread_size(name):
        return FieldRole.THREAD_SIZE
    return FieldRole.DEFAULT


def _is_material(name: str) -> bool:
    return name == "material" or name.endswith(" material")


def _is_diameter(name: str) -> bool:
    return (
        name == "diameter"
        or name.endswith(" diameter")
        or name.startswith("diameter ")
        or name == "bore"
        or name.endswith(" bore")
    )


def _is_length(name: str) -> bool:
    # "overall ... length" is covered by the suffix check
    return name == "length" or name.endswith(" length") or name.startswith("length ")


def _is_dimension(name: str) -> bool:
    if _is_diameter(name) or _is_length(name):
        return True
    for word in ("width", "height", "od", "id"):
        if name == word or name.endswith(" " + word):
            return True
    return "mounting hole center" in name


def _is_thread_size(name: str) -> bool:
    if name.startswith("thread size"):
        return True
    return name.startswith("thread (") and ") size" in name
