"""Drawing primitives on numpy RGB frame buffers.

Buffers are ``(height, width, 3)`` uint8 arrays. Coordinates are floats in
canvas pixels; shapes are clipped to the buffer and alpha-blended over
what is already there.
"""

from typing import Optional, Sequence, Tuple
import math

import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]
GradientStop = Tuple[float, Tuple[float, float, float, float]]


def new_buffer(width: int, height: int) -> Buffer:
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def _clip(buffer: Buffer, x1: float, y1: float, x2: float, y2: float) -> Optional[Tuple[int, int, int, int]]:
    """Integer pixel box of [x1, x2) x [y1, y2) inside the buffer, or None if empty."""
    h, w = buffer.shape[:2]
    ix1 = max(0, min(int(math.floor(x1)), w))
    iy1 = max(0, min(int(math.floor(y1)), h))
    ix2 = max(0, min(int(math.ceil(x2)), w))
    iy2 = max(0, min(int(math.ceil(y2)), h))
    if ix2 <= ix1 or iy2 <= iy1:
        return None
    return ix1, iy1, ix2, iy2


def _blend(region: Buffer, color, alpha, mask: Optional[NDArray[np.bool_]] = None) -> None:
    """Blend ``color`` over ``region`` in place. ``alpha`` may be a scalar or per-pixel array."""
    if mask is not None and not mask.any():
        return

    src = np.asarray(color, dtype=np.float32)
    if np.isscalar(alpha) and alpha >= 1.0:
        opaque = np.clip(src, 0, 255).astype(np.uint8)
        if mask is None:
            region[:, :] = opaque
        elif opaque.ndim == 1:
            region[mask] = opaque
        else:
            region[mask] = opaque[mask]
        return

    a = np.asarray(alpha, dtype=np.float32)
    if a.ndim == 2:
        a = a[..., None]
    dst = region.astype(np.float32)
    out = src * a + dst * (1.0 - a)
    out = np.clip(out, 0, 255).astype(np.uint8)
    if mask is None:
        region[:, :] = out
    else:
        region[mask] = out[mask]


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Draw a filled rectangle.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        alpha: Opacity from 0.0 to 1.0
    """
    if width <= 0 or height <= 0 or alpha <= 0:
        return
    box = _clip(buffer, x, y, x + width, y + height)
    if box is None:
        return
    x1, y1, x2, y2 = box
    _blend(buffer[y1:y2, x1:x2], color, alpha)


def _disc_distance(buffer: Buffer, cx: float, cy: float, radius: float):
    """Pixel box around a circle and the distance of each pixel centre to (cx, cy)."""
    box = _clip(buffer, cx - radius, cy - radius, cx + radius + 1, cy + radius + 1)
    if box is None:
        return None, None
    x1, y1, x2, y2 = box
    ys, xs = np.ogrid[y1:y2, x1:x2]
    dist = np.sqrt((xs + 0.5 - cx) ** 2 + (ys + 0.5 - cy) ** 2)
    return box, dist


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Draw a filled circle centred on (cx, cy)."""
    if radius <= 0 or alpha <= 0:
        return
    box, dist = _disc_distance(buffer, cx, cy, radius)
    if box is None:
        return
    x1, y1, x2, y2 = box
    _blend(buffer[y1:y2, x1:x2], color, alpha, mask=dist <= radius)


def draw_ring(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
    thickness: float = 2.0,
    alpha: float = 1.0,
) -> None:
    """Draw a circle outline of the given stroke width centred on the radius."""
    if radius <= 0 or thickness <= 0 or alpha <= 0:
        return
    half = thickness / 2
    box, dist = _disc_distance(buffer, cx, cy, radius + half)
    if box is None:
        return
    x1, y1, x2, y2 = box
    mask = np.abs(dist - radius) <= half
    _blend(buffer[y1:y2, x1:x2], color, alpha, mask=mask)


def draw_radial_gradient(
    buffer: Buffer,
    cx: float,
    cy: float,
    inner_radius: float,
    outer_radius: float,
    stops: Sequence[GradientStop],
) -> None:
    """Fill a disc of ``outer_radius`` with an RGBA gradient running from inner to outer radius.

    Pixels closer than ``inner_radius`` take the first stop's color.
    """
    if outer_radius <= inner_radius or not stops:
        return
    box, dist = _disc_distance(buffer, cx, cy, outer_radius)
    if box is None:
        return
    x1, y1, x2, y2 = box

    t = np.clip((dist - inner_radius) / (outer_radius - inner_radius), 0.0, 1.0)
    offsets = [offset for offset, _ in stops]
    channels = np.array([color for _, color in stops], dtype=np.float32)

    rgb = np.stack([np.interp(t, offsets, channels[:, i]) for i in range(3)], axis=-1)
    alpha = np.interp(t, offsets, channels[:, 3])

    mask = dist <= outer_radius
    _blend(buffer[y1:y2, x1:x2], rgb, alpha, mask=mask)


def draw_image(
    buffer: Buffer,
    image: Buffer,
    x: float,
    y: float,
    alpha: float = 1.0,
) -> None:
    """Draw an RGB image with its top-left corner at (x, y)."""
    img_h, img_w = image.shape[:2]
    ox, oy = int(round(x)), int(round(y))
    box = _clip(buffer, ox, oy, ox + img_w, oy + img_h)
    if box is None:
        return
    x1, y1, x2, y2 = box
    src = image[y1 - oy:y2 - oy, x1 - ox:x2 - ox, :3]
    _blend(buffer[y1:y2, x1:x2], src, alpha)
