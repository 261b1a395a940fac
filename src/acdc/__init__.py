"""
ACDC Argument List Utilities

Parameter normalization shared by the mixed AC-DC building distribution
system toolkit.

Components and models accept their settings as flat name-value argument
lists, e.g. ["Vnom", 380, "Type", "DC"]. This package converts such lists
into dicts, filters them against accepted names, and reports problems under
namespaced identifiers (ACDC:<class>:<kind>).

This package holds NO component models. Callers own the records it returns.
"""

from .arglist import (
    ArgListError,
    ArgListWarning,
    InvalidArgNameError,
    MismatchedArgListError,
    UnknownOptionWarning,
    UnrecognizedArgNameWarning,
    parse_args,
    to_arg_list,
    to_struct,
)

__version__ = "0.1.0"

__all__ = [
    "ArgListError",
    "ArgListWarning",
    "InvalidArgNameError",
    "MismatchedArgListError",
    "UnknownOptionWarning",
    "UnrecognizedArgNameWarning",
    "parse_args",
    "to_arg_list",
    "to_struct",
]
