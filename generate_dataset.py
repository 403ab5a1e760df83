# Writes random square matrix pairs in the strassen-multiply input format.
import os
import numpy as np


def generate_matrix_pair(size, low=0, high=100, rng=None):
    rng = rng or np.random.default_rng()
    matrix_a = rng.integers(low, high, (size, size)).tolist()
    matrix_b = rng.integers(low, high, (size, size)).tolist()
    return matrix_a, matrix_b


def format_input(matrix_a, matrix_b):
    lines = [str(len(matrix_a))]
    for m in (matrix_a, matrix_b):
        lines.extend(" ".join(str(v) for v in row) for row in m)
    return "\n".join(lines) + "\n"


def save_matrix_pairs(out_dir, experiments, seed=None):
    rng = np.random.default_rng(seed)
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for exp in experiments:
        size = exp["size"]
        for k in range(exp.get("count", 1)):
            matrix_a, matrix_b = generate_matrix_pair(size, rng=rng)
            path = os.path.join(out_dir, f"pair_{size}x{size}_{k:03d}.txt")
            with open(path, "w") as f:
                f.write(format_input(matrix_a, matrix_b))
            paths.append(path)
    return paths


if __name__ == "__main__":
    experiments = [
        {"size": 3, "count": 2},
        {"size": 17, "count": 2},
        {"size": 64, "count": 1},
        {"size": 100, "count": 1},
    ]
    for p in save_matrix_pairs("matrix_dataset", experiments):
        print(p)
