import enum


OTHER = "other"  # Sentinel for free-text material/thickness, always a manual quote


class Template(str, enum.Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    RECT_HOLES = "rect_holes"
    TRIANGLE_HOLES = "triangle_holes"


class Finishing(str, enum.Enum):
    NONE = "none"
    POWDER_COATED = "powder_coated"
    MATTE = "matte"
    CUSTOM = "custom"


class PrimitiveRole(str, enum.Enum):
    OUTLINE = "outline"
    HOLE = "hole"


# Holes per template. Templates missing here have no holes.
HOLE_COUNTS = {
    Template.RECT_HOLES: 4,
    Template.TRIANGLE_HOLES: 3,
}
