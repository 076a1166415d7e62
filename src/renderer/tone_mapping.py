# renderer/tone_mapping.py
import numpy as np

def clamp_tone_mapping(image: np.ndarray) -> np.ndarray:
    """
    Clamp a linear image to [0, 1] and convert it to 8-bit. Flat colors in
    range come out unchanged apart from quantization.
    """
    return (np.clip(image, 0.0, 1.0) * 255.999).astype("uint8")

def reinhard_tone_mapping(image: np.ndarray, exposure=1.0, white_point=1.0, gamma=2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(image, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return (mapped * 255).clip(0, 255).astype("uint8")

TONE_MAPPERS = {
    "clamp": clamp_tone_mapping,
    "reinhard": reinhard_tone_mapping,
}
