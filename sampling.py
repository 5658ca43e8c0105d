# sampling.py

import numpy as np
import constants as C
import logger as log

def sample_square(count=C.SAMPLE_POINT_COUNT, half_width=C.SAMPLE_SQUARE_HALF_WIDTH, seed=C.SAMPLE_RANDOM_SEED):
    """
    Draws uniform random points in the square [-half_width, half_width)^2.
    Returns an (count, 2) float64 array. A seed of None draws fresh entropy.
    """
    rng = np.random.RandomState(seed)
    return (rng.random_sample((count, 2)) - 0.5) * 2 * half_width

def classify(samples, triangle):
    """Splits an (n, 2) array into (inside, outside) rows using the triangle's containment test."""
    samples = np.asarray(samples, dtype=np.float64).reshape(-1, 2)
    mask = triangle.contains_array(samples[:, 0], samples[:, 1])
    return samples[mask], samples[~mask]

def insert_samples(tree, samples, on_progress=None, interval=C.UI_LOADING_BAR_UPDATE_INTERVAL):
    """
    Inserts every row of an (n, 2) array into the tree, in order.
    on_progress(done, total, accepted) is called every `interval` rows and once
    at the end. Returns the number of points the tree accepted.
    """
    samples = np.asarray(samples, dtype=np.float64).reshape(-1, 2)
    total = len(samples)
    accepted = 0
    for i, (x, y) in enumerate(samples, start=1):
        if tree.insert((x, y)):
            accepted += 1
        if on_progress is not None and (i % interval == 0 or i == total):
            on_progress(i, total, accepted)
    log.log(f"Inserted {accepted:,} of {total:,} sampled points.")
    return accepted
