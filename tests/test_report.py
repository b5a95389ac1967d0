import tempfile
import unittest

import polars as pl

from biasvar.report import (
    COLUMNS,
    assessment_table,
    load_table,
    model_label,
    save_table,
    summary,
)

METRICS = {
    2: {"rmse": 1.01, "bias2": 0.002, "variance": 4.5},
    1: {"rmse": 4.2, "bias2": 1.3, "variance": 2.0},
    20: {"rmse": 3.3, "bias2": 0.05, "variance": 9.75},
}


class TestAssessmentTable(unittest.TestCase):
    def setUp(self) -> None:
        self.table = assessment_table(METRICS)

    def test_label(self):
        self.assertEqual(model_label(15), "Degree 15 Fit")

    def test_columns(self):
        self.assertEqual(self.table.columns, COLUMNS)
        self.assertEqual(self.table["RMSE"].dtype, pl.Float64)

    def test_rows_ascending(self):
        self.assertListEqual(
            self.table["Model"].to_list(),
            ["Degree 1 Fit", "Degree 2 Fit", "Degree 20 Fit"],
        )
        self.assertListEqual(self.table["RMSE"].to_list(), [4.2, 1.01, 3.3])
        self.assertListEqual(self.table["Bias²"].to_list(), [1.3, 0.002, 0.05])
        self.assertListEqual(self.table["Variance"].to_list(), [2.0, 4.5, 9.75])

    def test_summary(self):
        lines = summary(self.table)
        self.assertEqual(len(lines), 3)
        self.assertIn("Degree 2 Fit", lines[0])
        self.assertIn("Degree 2 Fit", lines[1])
        self.assertIn("Degree 20 Fit", lines[2])

    def test_summary_empty(self):
        self.assertEqual(summary(assessment_table({})), ["No models assessed"])


class TestSaveLoad(unittest.TestCase):
    def test_csv(self):
        self.save_load(".csv")

    def test_parquet(self):
        self.save_load(".parquet")

    def test_json(self):
        self.save_load(".json")

    def test_unsupported(self):
        with self.assertRaises(ValueError):
            self.save_load(".abc")

    def save_load(self, ext: str):
        table = assessment_table(METRICS)
        with tempfile.NamedTemporaryFile(suffix=ext) as tf:
            save_table(table, tf.name)
            loaded = load_table(tf.name)

            self.assertListEqual(
                table["Model"].to_list(),
                loaded["Model"].to_list(),
                "wrong `Model` column",
            )
            self.assertListEqual(
                table["Variance"].round(8).to_list(),
                loaded["Variance"].round(8).to_list(),
                "wrong `Variance` column",
            )
            self.assertDictEqual(
                dict(table.schema),
                dict(loaded.schema),
                "wrong schema",
            )


if __name__ == "__main__":
    unittest.main()
