import biasvar.plotting as bplt
from biasvar.config import SimulationConfig
from biasvar.study import BiasVarianceStudy


def main():
    study = BiasVarianceStudy(SimulationConfig(), verbose=1)
    print(study)

    table = study.run()
    print(table)

    for line in study.summary():
        print(line)

    bplt.set_plotly_template()
    bplt.fit_curves(study).show()
    bplt.metric_plot(table).show()


if __name__ == "__main__":
    main()
