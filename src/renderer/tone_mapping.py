# renderer/tone_mapping.py
import numpy as np

def gamma_correct(linear_image: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Convert a linear radiance image to 8-bit display values.

    Applies gamma correction, clamps to [0, 0.999] and scales by 256 so that
    1.0 maps to 255. NaN samples are written as black.
    """
    image = np.nan_to_num(np.asarray(linear_image, dtype=np.float64), nan=0.0)
    image = np.maximum(image, 0.0) ** (1.0 / gamma)
    output = (256.0 * image.clip(0.0, 0.999)).astype("uint8")
    return output
