from tracer.tracer import Tracer
from tracer.multiple_objects import MultipleObjects

__all__ = ["Tracer", "MultipleObjects"]
