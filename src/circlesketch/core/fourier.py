"""Discrete Fourier decomposition of a resampled contour.

Each point j of an N-point contour is the complex number z_j = x_j + i*y_j.
For every frequency k in [-K, K]:

    c_k = (1/N) * sum_{j=0}^{N-1} z_j * e^{-2*pi*i*k*j/N}

The full spectrum comes from one FFT; since the sum is periodic in k with
period N, c_k is the FFT bin k mod N. c_0 is the centroid of the points.
Coefficients are returned sorted by descending radius so that any prefix of
the sequence is the best visual approximation with that many circles.
"""

import numpy as np
import structlog

from circlesketch.domain import ComplexCoefficient, Contour, FourierDecomposition
from circlesketch.exceptions import ContourError

logger = structlog.get_logger(__name__)


def frequencies(num_terms: int) -> list[int]:
    """Frequencies computed for a one-sided term count.

    Args:
        num_terms: K, the highest absolute frequency

    Returns:
        [0, 1, -1, 2, -2, ..., K, -K]
    """
    freqs = [0]
    for k in range(1, num_terms + 1):
        freqs.append(k)
        freqs.append(-k)
    return freqs


def complex_signal(contour: Contour) -> np.ndarray:
    """Contour points as a complex array x + i*y."""
    xy = np.asarray(contour.to_tuples(), dtype=float).reshape(-1, 2)
    return xy[:, 0] + 1j * xy[:, 1]


def fourier_decomposition(contour: Contour, num_terms: int) -> FourierDecomposition:
    """Decompose a uniformly sampled contour into 2*num_terms + 1 terms.

    Args:
        contour: Contour already resampled to uniform t spacing
        num_terms: K; frequencies -K..K are computed

    Returns:
        Decomposition sorted by descending radius

    Raises:
        ContourError: If the contour is empty or num_terms is negative
    """
    n = len(contour)
    if n == 0:
        raise ContourError("Cannot decompose an empty contour")
    if num_terms < 0:
        raise ContourError(f"Term count must be non-negative, got {num_terms}")

    spectrum = np.fft.fft(complex_signal(contour)) / n
    freqs = np.array(frequencies(num_terms))
    values = spectrum[freqs % n]

    # Stable sort keeps frequency order among equal radii
    order = np.argsort(-np.abs(values), kind="stable")

    coeffs = tuple(
        ComplexCoefficient(freq=int(freqs[i]), re=float(values[i].real), im=float(values[i].imag))
        for i in order
    )

    logger.debug("Fourier decomposition", points=n, terms=num_terms, coefficients=len(coeffs))
    return FourierDecomposition(coeffs)
