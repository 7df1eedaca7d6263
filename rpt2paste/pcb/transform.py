"""Coordinate transformation utilities."""
import math

from .models import ComponentContext, Point

# Report orientations turn the opposite way to the output frame (the
# report is mirrored), so degrees are negated on the way in.
ROTATION_SIGN = -1.0


def rotate_point(point: Point, angle_rad: float) -> Point:
    """
    Rotate a point around the origin by the given angle.

    Args:
        point: Point to rotate
        angle_rad: Rotation angle in radians (counterclockwise positive)

    Returns:
        Rotated point
    """
    if angle_rad == 0:
        return Point(point.x, point.y)

    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)

    rotated_x = point.x * cos_a - point.y * sin_a
    rotated_y = point.x * sin_a + point.y * cos_a

    return Point(rotated_x, rotated_y)


def translate_point(point: Point, offset: Point) -> Point:
    """Shift a point by an offset vector."""
    return point + offset


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def orientation_to_radians(angle_deg: float) -> float:
    """Convert a report orientation (degrees) to the internal rotation."""
    return ROTATION_SIGN * math.pi * angle_deg / 180.0


def transform_pad_position(local: Point, context: ComponentContext, scale: float) -> Point:
    """
    Transform a pad offset from component-relative to global coordinates.

    Args:
        local: Pad offset from the component origin (report units)
        context: Enclosing component placement
        scale: Linear unit factor applied to the final position

    Returns:
        Global pad position in target units
    """
    rotated = rotate_point(local, context.rotation)
    absolute = translate_point(rotated, context.origin)
    return absolute * scale
