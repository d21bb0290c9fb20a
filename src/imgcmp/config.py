from dataclasses import dataclass

# Side length of the reduced grayscale grid sampled by the average hash
GRID_SIZE = 8
HASH_LENGTH = GRID_SIZE * GRID_SIZE

# Fingerprints closer than this Hamming distance are considered equal
EQUALITY_THRESHOLD = 10


@dataclass
class Settings:
    threshold: int = EQUALITY_THRESHOLD
