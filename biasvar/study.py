from timeit import default_timer
from typing import Literal

import numpy as np
import polars as pl

from biasvar import report
from biasvar.config import SimulationConfig
from biasvar.data import Sample, Split, generate_sample, stratified_split
from biasvar.metrics import evaluate_models, sample_points
from biasvar.models import PolynomialModel, fit_models


class BiasVarianceStudy:
    """Bias-variance trade-off for polynomial fits of a noisy quadratic.

    Runs once: generate data, split, fit one model per degree, evaluate, tabulate.
    Each stage uses its own seed from the config, so reruns are identical.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        verbose: Literal[0, 1, 2] = 0,
    ) -> None:
        """
        ## parameters
        - config (SimulationConfig|None): study settings. Default: published study.
        - verbose (int): amount of status information printed
        """
        if config is None:
            config = SimulationConfig()

        self.config = config
        self.verbose = verbose

        self.sample: Sample | None = None
        self.split: Split | None = None
        self.models: dict[int, PolynomialModel] = {}
        self.predictions: dict[int, np.ndarray] = {}
        self.point_indices: np.ndarray | None = None
        self.metrics: dict[int, dict[str, float]] = {}
        self.table: pl.DataFrame | None = None

    def __str__(self):
        c = self.config
        lines = [
            f"Bias-variance study, n={c.n}, degrees {list(c.degrees)}",
            f"  - seeds: data {c.data_seed}, points {c.point_seed}",
        ]
        if self.split is not None:
            lines.append(f"  - {self.split}")
        if self.table is not None:
            lines.append(f"  - {len(self.table)} models assessed")
        return "\n".join(lines)

    @property
    def is_run(self) -> bool:
        return self.table is not None

    def run(self) -> pl.DataFrame:
        """Run the full pipeline.

        ## returns
        - table (DataFrame): columns Model, RMSE, Bias², Variance
        """
        if self.is_run:
            return self.table

        c = self.config
        t_start = default_timer()

        # split draws from a child stream of the data seed
        split_seed = np.random.SeedSequence(c.data_seed).spawn(1)[0]

        self.sample = generate_sample(c.data_seed, c.n, c.coefficients)
        self.split = stratified_split(
            self.sample.x,
            seed=split_seed,
            train_fraction=c.train_fraction,
            groups=c.strata,
        )
        if self.verbose >= 1:
            print(self.split)

        x_train, y_train = self.split.train(self.sample)
        x_test, y_test = self.split.test(self.sample)
        f_test = self.sample.f[self.split.test_indices]

        self.models = fit_models(
            x_train,
            y_train,
            c.degrees,
            basis=c.basis,
            verbose=self.verbose,
        )
        self.predictions = {d: m.predict(x_test) for d, m in self.models.items()}

        self.point_indices = sample_points(len(x_test), c.n_points, c.point_seed)
        if self.verbose >= 2:
            print(f"bias/variance at test positions {self.point_indices.tolist()}")

        self.metrics = evaluate_models(
            self.models,
            x_test,
            y_test,
            f_test,
            self.point_indices,
            reverse_bias_variance=c.reverse_bias_variance,
        )
        self.table = report.assessment_table(self.metrics)

        if self.verbose >= 1:
            print(f"Elapsed time {default_timer() - t_start:.3f} s.")

        return self.table

    def summary(self) -> list[str]:
        return report.summary(self.run())

    def save_table(self, path: str):
        """Save the assessment table (.parquet, .csv, .json)."""
        report.save_table(self.run(), path)
