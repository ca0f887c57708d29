# Module: metrics.py
import numpy as np
from skimage import metrics

def compute_quality_metrics(original, reconstructed, data_range=255):
    """Compute PSNR and SSIM between a grayscale image and its superpixel reconstruction."""
    original = np.asarray(original, dtype=np.float64)
    reconstructed = np.asarray(reconstructed, dtype=np.float64)
    psnr = metrics.peak_signal_noise_ratio(original, reconstructed, data_range=data_range)
    ssim = metrics.structural_similarity(original, reconstructed, data_range=data_range)
    return psnr, ssim
