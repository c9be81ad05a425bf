from .base import BaseEngine, BaseEngineConfig
from .mersenne import MersenneRNG, MersenneConfig
from .sampler import Sampler
from .auto_engine import AutoEngine
