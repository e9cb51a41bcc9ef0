# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

class StateError(RuntimeError):
	'''Indicates the object is in (or would be set to) an invalid state.'''
	pass

class SetModifiedError(StateError):
	'''Indicates a set was structurally modified while a cursor over it was still in use.'''
	pass
