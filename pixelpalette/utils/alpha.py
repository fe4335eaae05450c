"""Alpha flattening onto an opaque white background."""
from __future__ import annotations

import numpy as np

Array = np.ndarray

BACKGROUND = (255, 255, 255)


def flatten_alpha(arr: Array) -> None:
    """Composite translucent pixels onto white, in place.

    For every pixel with alpha ``a < 255`` each colour channel becomes
    ``round(c * t + 255 * (1 - t))`` with ``t = a / 255`` (halves round up)
    and alpha becomes 255. Opaque pixels are left byte-identical, so a second
    call is a no-op.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must be an RGBA image with shape (H, W, 4)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")

    mask = arr[:, :, 3] < 255
    if not mask.any():
        return

    px = arr[mask]
    t = px[:, 3:4].astype(np.float64) / 255.0
    bg = np.asarray(BACKGROUND, dtype=np.float64)
    blended = px[:, :3].astype(np.float64) * t + bg * (1.0 - t)
    px[:, :3] = np.clip(np.floor(blended + 0.5), 0, 255).astype(np.uint8)
    px[:, 3] = 255
    arr[mask] = px
