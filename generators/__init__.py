from .number import NumberGenerator
from .typed import TypedGenerator
from .composite import CompositeGenerator
from .auto_generator import AutoGenerator
