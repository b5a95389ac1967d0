import os

import polars as pl

COLUMNS = ["Model", "RMSE", "Bias²", "Variance"]

SCHEMA = {
    "Model": pl.String,
    "RMSE": pl.Float64,
    "Bias²": pl.Float64,
    "Variance": pl.Float64,
}


def model_label(degree: int) -> str:
    return f"Degree {degree} Fit"


def assessment_table(metrics: dict[int, dict[str, float]]) -> pl.DataFrame:
    """Collect metrics into a table.

    ## parameters
    - metrics (dict): degree -> {"rmse", "bias2", "variance"}

    ## returns
    - table (DataFrame): columns Model, RMSE, Bias², Variance
        - one row per degree, ascending.
    """
    rows = [
        (model_label(d), m["rmse"], m["bias2"], m["variance"])
        for d, m in sorted(metrics.items())
    ]
    return pl.DataFrame(rows, schema=SCHEMA, orient="row")


def summary(table: pl.DataFrame) -> list[str]:
    """A few lines of commentary on the table."""
    if table.is_empty():
        return ["No models assessed"]

    def best(col: str, how: str = "min") -> pl.DataFrame:
        target = pl.col(col).min() if how == "min" else pl.col(col).max()
        return table.filter(pl.col(col) == target).head(1)

    lowest_rmse = best("RMSE")
    lowest_bias = best("Bias²")
    highest_var = best("Variance", "max")

    return [
        f"Lowest test RMSE: {lowest_rmse['Model'][0]} ({lowest_rmse['RMSE'][0]:.4f})",
        f"Lowest bias²: {lowest_bias['Model'][0]} ({lowest_bias['Bias²'][0]:.4f})",
        f"Highest variance: {highest_var['Model'][0]} "
        f"({highest_var['Variance'][0]:.4f})",
    ]


def save_table(table: pl.DataFrame, path: str):
    """Write table to file, format from the extension (.parquet, .csv, .json)."""
    _, ext = os.path.splitext(path)

    if ext == ".parquet":
        table.write_parquet(path)
    elif ext == ".csv":
        table.write_csv(path)
    elif ext == ".json":
        table.write_json(path)
    else:
        raise ValueError(f"Unsupported file format: {ext}")


def load_table(path: str) -> pl.DataFrame:
    """Read a table written by `save_table`."""
    _, ext = os.path.splitext(path)

    if ext == ".parquet":
        loaded = pl.read_parquet(path)
        if dict(loaded.schema) != SCHEMA:
            raise ValueError(f"Incorrect file schema: {loaded.schema}")
    elif ext == ".csv":
        loaded = pl.read_csv(path, schema=SCHEMA)
    elif ext == ".json":
        loaded = pl.read_json(path, schema=SCHEMA)
    else:
        raise ValueError(f"Unsupported file format: {ext}")

    return loaded
