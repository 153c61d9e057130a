"""
Tabloc exceptions

Base exception hierarchy for all tabloc modules
"""


class TablocError(Exception):
    """
    Base exception for all tabloc errors
    
    All module-specific exceptions should inherit from this class
    to maintain a consistent exception hierarchy across the package.
    """
    pass


class ConfigurationError(TablocError):
    """Configuration or initialization error"""
    pass


class StructuralError(TablocError):
    """
    The input is not a tree
    
    Raised when enumeration reaches the same node twice (a cycle or a
    shared subtree). Fatal to the current invocation.
    """
    pass


class EmptyHistogramError(TablocError):
    """A node without counted children reached the dominance stage"""
    pass


class ReaderError(TablocError):
    """Tree source could not produce a tree from its input"""
    pass
