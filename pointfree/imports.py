# These are imported by every module
from typing import Any
from typing import Callable
from typing import List
from typing import Tuple
from typing import Dict
from typing import Union
from typing import Optional
import math
import numbers
import random
import logging

from collections.abc import Hashable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
import copy
import enum
import inspect
import operator
import sys

# Name of the package logger. Sessions log to it or to a child of it.
LOGGER_NAME = 'pointfree'

# Bit width used by the unsigned shift word.
U32_MASK = 0xFFFFFFFF
