from .mersenne import MersenneRNG, MersenneConfig
