# eventboard/schemas/__init__.py
"""
Schema module initialization.
Exports all request schema classes from submodules for convenient imports.
"""
from .user import *
from .group import *
from .event import *
