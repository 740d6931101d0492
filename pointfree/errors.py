class PointfreeError(Exception): pass

class IllegalStateError(PointfreeError, RuntimeError): pass
class IllegalArgError(PointfreeError, ValueError): pass

# Raised by depth checks in safe mode.
class StkUnderflowError(IllegalStateError, IndexError): pass

class NoMatchingCaseError(IllegalStateError): pass

# An unwrapping word (see wordU) used where a stack word is expected.
class WordTypeError(PointfreeError, TypeError): pass
