from .sampler import Sampler
from .variant import Literal, Choice, Thunk, lift, resolve
