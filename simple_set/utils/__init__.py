from .error_strings import UNHASHABLE_ELEMENT_STRING as UNHASHABLE_ELEMENT_STRING

from .profiler import profile as profile
