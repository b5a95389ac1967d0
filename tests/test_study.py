import tempfile
import unittest

import polars as pl

from biasvar.config import DEGREES, SimulationConfig
from biasvar.errors import ConfigurationError, FittingError, SamplingError
from biasvar.report import load_table
from biasvar.study import BiasVarianceStudy


class TestPublishedStudy(unittest.TestCase):
    """seed 2401 for the data, 12345 for the bias/variance points"""

    @classmethod
    def setUpClass(cls) -> None:
        cls.study = BiasVarianceStudy(SimulationConfig(data_seed=2401, point_seed=12345))
        cls.table = cls.study.run()

    def rmse(self, degree: int) -> float:
        return self.table.filter(pl.col("Model") == f"Degree {degree} Fit")["RMSE"][0]

    def test_table(self):
        self.assertEqual(self.table.columns, ["Model", "RMSE", "Bias²", "Variance"])
        self.assertListEqual(
            self.table["Model"].to_list(),
            [f"Degree {d} Fit" for d in DEGREES],
        )

    def test_quadratic_wins(self):
        self.assertLess(self.rmse(2), self.rmse(1))
        self.assertLessEqual(self.rmse(2), self.rmse(20))

    def test_nonnegative(self):
        self.assertTrue((self.table["Bias²"] >= 0).all())
        self.assertTrue((self.table["Variance"] >= 0).all())

    def test_predictions(self):
        self.assertListEqual(list(self.study.predictions.keys()), list(DEGREES))
        for pred in self.study.predictions.values():
            self.assertEqual(pred.shape, (50,))

    def test_points(self):
        idx = self.study.point_indices.tolist()
        self.assertEqual(len(idx), 5)
        self.assertEqual(len(set(idx)), 5)
        self.assertTrue(all(0 <= i < 50 for i in idx))

    def test_models_fit_on_train_only(self):
        for model in self.study.models.values():
            self.assertEqual(len(model.x), 150)

    def test_reproducible(self):
        again = BiasVarianceStudy(SimulationConfig()).run()
        self.assertTrue(self.table.equals(again), "rerun gives a different table")

    def test_run_once(self):
        self.assertIs(self.study.run(), self.table)

    def test_str(self):
        text = str(self.study)
        self.assertIn("n=200", text)
        self.assertIn("150 train, 50 test", text)

    def test_summary(self):
        self.assertEqual(len(self.study.summary()), 3)

    def test_save(self):
        with tempfile.NamedTemporaryFile(suffix=".csv") as tf:
            self.study.save_table(tf.name)
            loaded = load_table(tf.name)
        self.assertListEqual(loaded["Model"].to_list(), self.table["Model"].to_list())


class TestReversedOrdering(unittest.TestCase):
    def test_reversed(self):
        straight = BiasVarianceStudy(SimulationConfig()).run()
        reversed_ = BiasVarianceStudy(SimulationConfig(reverse_bias_variance=True)).run()

        self.assertListEqual(straight["RMSE"].to_list(), reversed_["RMSE"].to_list())
        self.assertListEqual(
            straight["Bias²"].to_list()[::-1], reversed_["Bias²"].to_list()
        )
        self.assertListEqual(
            straight["Variance"].to_list()[::-1], reversed_["Variance"].to_list()
        )


class TestStudyErrors(unittest.TestCase):
    def test_config(self):
        with self.assertRaises(ConfigurationError):
            SimulationConfig(train_fraction=1.5)
        with self.assertRaises(ConfigurationError):
            SimulationConfig(degrees=(3, 1))
        with self.assertRaises(ConfigurationError):
            SimulationConfig(basis="chebyshev")
        with self.assertRaises(ConfigurationError):
            SimulationConfig(n=1)

    def test_too_many_points(self):
        # 20 samples -> 15 train, 5 test
        study = BiasVarianceStudy(SimulationConfig(n=20, degrees=(1, 2), n_points=6))
        with self.assertRaises(SamplingError):
            study.run()

    def test_degree_too_high(self):
        study = BiasVarianceStudy(SimulationConfig(n=20, degrees=(1, 15)))
        with self.assertRaises(FittingError):
            study.run()

    def test_degenerate_split(self):
        study = BiasVarianceStudy(SimulationConfig(n=2, train_fraction=0.9))
        with self.assertRaises(ConfigurationError):
            study.run()

    def test_monomial(self):
        study = BiasVarianceStudy(SimulationConfig(degrees=(1, 2, 3), basis="monomial"))
        table = study.run()
        self.assertEqual(len(table), 3)


if __name__ == "__main__":
    unittest.main()
