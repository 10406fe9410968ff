# renderer/tone_mapping.py
import numpy as np

def gamma_correct(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Average summed radiance, apply gamma 2 (square root) and quantize to
    8 bits. Non-finite components become black instead of propagating.
    """
    scaled = accumulated / samples_per_pixel
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=0.0, neginf=0.0)
    mapped = np.sqrt(np.clip(scaled, 0.0, None))
    output = (256 * np.clip(mapped, 0.0, 0.999)).astype("uint8")
    return output
