# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

from .core import BaseSet, HashSet, StringSet, new_string_set, union, intersect, subtract
from .cursor import SetCursor
from .errors import StateError, SetModifiedError

__all__ = [
	"BaseSet",
	"HashSet",
	"StringSet",
	"new_string_set",
	"union",
	"intersect",
	"subtract",
	"SetCursor",
	"StateError",
	"SetModifiedError",
]
