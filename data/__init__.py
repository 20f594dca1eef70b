from .stochastic import StochasticSource, UniformSource, ConstantSource, SequenceSource
from .generator import (sample_nodes, sample_requests, sample_services,
                        generate_nodes, generate_requests,
                        perturb_requests, perturb_nodes)
