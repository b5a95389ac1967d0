from biasvar.config import SimulationConfig
from biasvar.study import BiasVarianceStudy

# bias/variance attached in reversed order, as in the reference report
faithful = BiasVarianceStudy(SimulationConfig(reverse_bias_variance=True))
corrected = BiasVarianceStudy(SimulationConfig())

print("reference ordering:")
print(faithful.run())
print("corrected ordering:")
print(corrected.run())
