import numpy as np

from foretpe import (
    TpeOptimizer,
    histogram_estimator_factory,
    make_categorical_range,
    make_continuous_range,
    parzen_estimator_factory,
)


def objective(x: float, y: int) -> float:
    return x ** 2 + y


def run(n_trials: int = 100, seed: int = 0):
    choices = [1, 10, 100]
    optim_x = TpeOptimizer(parzen_estimator_factory(), make_continuous_range(-5.0, 5.0))
    optim_y = TpeOptimizer(histogram_estimator_factory(), make_categorical_range(len(choices)))

    rng = np.random.default_rng(seed)
    best_value = float("inf")
    for _ in range(n_trials):
        x = optim_x.ask(rng)
        y = optim_y.ask(rng)

        v = objective(x, choices[y])
        optim_x.tell(x, v)
        optim_y.tell(y, v)
        best_value = min(best_value, v)

    print(f"Best value after {n_trials} trials: {best_value:.6f}")
    print(f"x diagnostics: {optim_x.diagnostics()}")
    print(f"y diagnostics: {optim_y.diagnostics()}")
    return best_value


if __name__ == "__main__":
    run()
