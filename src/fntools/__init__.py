"""
Module dependencies:
    basetypes.py:
        imports inspect, types, typing
    currying.py:
        depends on basetypes
        imports functools, logging
    datatypes.py:
        depends on basetypes
        imports abc, dataclasses, logging
    piping.py:
        depends on basetypes
        imports functools, inspect, logging
    sequences.py:
        depends on basetypes, currying
        requires pydantic_core
    objects.py:
        depends on basetypes, currying, sequences
        requires pydantic, pydantic_core, toolz
    utilities.py:
        depends on basetypes
        imports functools, logging, random

Requirements:
    pydantic
    pydantic_core
    toolz
"""
from fntools.basetypes import *
from fntools.currying import *
from fntools.datatypes import *
from fntools.piping import *
from fntools.sequences import *
from fntools.objects import *
from fntools.utilities import *
