import random


def random_split_bytes(data: bytes, rng: random.Random | None = None) -> list[bytes]:
    """Split data into a random number of non-empty chunks of random size."""
    rng = rng or random.Random()
    if len(data) < 2:
        return [data]
    cuts = sorted(rng.sample(range(1, len(data)), rng.randint(1, min(8, len(data) - 1))))
    bounds = [0, *cuts, len(data)]
    return [data[lo:hi] for lo, hi in zip(bounds, bounds[1:])]
