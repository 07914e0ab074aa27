"""
Domain Layer

Writer capabilities and the error hierarchy, with no infrastructure
dependencies.
"""

from .ports import *
from .exceptions import *
