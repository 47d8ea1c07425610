# renderer/tone_mapping.py
import numpy as np

def clamp_buffer(buffer: np.ndarray) -> np.ndarray:
    """
    Pins every channel of a linear radiance buffer into [0, 1].
    """
    return np.clip(buffer, 0.0, 1.0)

def to_uint8(buffer: np.ndarray, gamma: float = 1.0) -> np.ndarray:
    """
    Converts a linear [0, 1] buffer into 8-bit values, with optional gamma
    encoding (gamma=1.0 leaves the values linear).
    """
    mapped = clamp_buffer(buffer)
    if gamma != 1.0:
        mapped = mapped ** (1.0 / gamma)
    output = np.rint(mapped * 255).clip(0, 255).astype("uint8")
    return output
