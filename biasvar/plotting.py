"""Plotting functions for a study. Based on plotly"""

import numpy as np
from plotly import graph_objects as go
from plotly import io as pio
from plotly import subplots
from polars import DataFrame

from biasvar.data import quadratic
from biasvar.report import model_label
from biasvar.study import BiasVarianceStudy


def set_plotly_template():
    plot_temp = pio.templates["plotly_dark"]
    plot_temp.layout.width = 400
    plot_temp.layout.height = 300
    plot_temp.layout.autosize = False
    pio.templates.default = plot_temp


def fit_curves(study: BiasVarianceStudy, steps: int = 200) -> go.Figure:
    """Test data, true signal and every fitted polynomial.

    Curves are drawn over the training range, outside it the high degree
    fits blow up.
    """
    study.run()

    x_test, y_test = study.split.test(study.sample)
    lo = min(m.domain[0] for m in study.models.values())
    hi = max(m.domain[1] for m in study.models.values())
    grid = np.linspace(lo, hi, steps)

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=x_test, y=y_test, mode="markers", name="test data"))
    fig.add_trace(
        go.Scatter(
            x=grid,
            y=quadratic(grid, study.config.coefficients),
            mode="lines",
            name="truth",
            line={"dash": "dash"},
        )
    )
    for d, model in study.models.items():
        fig.add_trace(
            go.Scatter(x=grid, y=model.predict(grid), mode="lines", name=model_label(d))
        )

    fig.update_layout(xaxis_title="x", yaxis_title="y")
    return fig


def metric_plot(table: DataFrame) -> go.Figure:
    """RMSE, Bias² and Variance for each model, side by side."""

    stat_cols = ["RMSE", "Bias²", "Variance"]

    fig = subplots.make_subplots(1, len(stat_cols), subplot_titles=stat_cols)
    for i, col in enumerate(stat_cols):
        fig.add_trace(
            go.Scatter(
                x=table["Model"].to_list(),
                y=table[col].to_list(),
                mode="lines+markers",
                name=col,
            ),
            row=1,
            col=i + 1,
        )

    return fig
