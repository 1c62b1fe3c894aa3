import time

import numpy as np

from foretpe import TpeOptimizer, make_continuous_range, parzen_estimator_factory


def benchmark(n_trials: int = 100, n_seeds: int = 10):
    param_range = make_continuous_range(-5.0, 5.0)

    print(f"Starting benchmark (x^2 on {param_range}, {n_trials} trials, {n_seeds} seeds)...")
    start_time = time.time()

    tpe_best, random_best = [], []
    for seed in range(n_seeds):
        rng = np.random.default_rng(seed)
        opt = TpeOptimizer(parzen_estimator_factory(), param_range)
        for _ in range(n_trials):
            x = opt.ask(rng)
            opt.tell(x, x ** 2)
        tpe_best.append(opt.best.objective)

        xs = np.random.default_rng(seed).uniform(param_range.low, param_range.high, n_trials)
        random_best.append(float(np.min(xs ** 2)))

    end_time = time.time()
    print(f"Benchmark finished in {end_time - start_time:.2f} seconds")
    print(f"TPE    median best: {np.median(tpe_best):.3e}")
    print(f"Random median best: {np.median(random_best):.3e}")
    return tpe_best, random_best


if __name__ == "__main__":
    benchmark()
