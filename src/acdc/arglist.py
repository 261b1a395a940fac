"""
Name-Value Argument Lists

Converts flat, alternating name/value argument lists into records (dicts).

Typical caller:
    def configure(*args):
        opts = to_struct(list(args), "cName", "Bus", "validArgs", ["Vnom", "Type"])

Error identifiers follow a three-part namespaced code:

    ACDC:<cName>:<kind>

Problems with the control options themselves are always reported under the
fixed "toStruct" namespace, since cName is not known until they are parsed.

FATAL (raise ArgListError):
    - mismatchedArgList  odd-length argument or option list
    - invalidArgName     a name token that is not a str

ADVISORY (emit ArgListWarning, processing continues):
    - unknownOption        unrecognized control option (ignored)
    - unrecognizedArgName  argument name outside validArgs (dropped)
"""

from __future__ import annotations

import sys
import warnings
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence


ERROR_PREFIX = "ACDC"
DEFAULT_CLASS_NAME = "general"
OPTIONS_NAMESPACE = "toStruct"

MISMATCHED_ARG_LIST = "mismatchedArgList"
INVALID_ARG_NAME = "invalidArgName"
UNKNOWN_OPTION = "unknownOption"
UNRECOGNIZED_ARG_NAME = "unrecognizedArgName"

WarningHandler = Callable[["ArgListWarning"], None]


def make_identifier(class_name: str, kind: str) -> str:
    """Build a namespaced identifier, e.g. ``ACDC:general:invalidArgName``."""
    return f"{ERROR_PREFIX}:{class_name}:{kind}"


class ArgListError(ValueError):
    """Raised when an argument list is structurally malformed."""

    kind = ""

    def __init__(self, message: str, class_name: str = DEFAULT_CLASS_NAME):
        self.class_name = class_name
        self.identifier = make_identifier(class_name, self.kind)
        super().__init__(f"{self.identifier}: {message}")


class MismatchedArgListError(ArgListError):
    """Raised when a list does not form name-value pairs."""
    kind = MISMATCHED_ARG_LIST


class InvalidArgNameError(ArgListError):
    """Raised when an argument name is not a string."""
    kind = INVALID_ARG_NAME


class ArgListWarning(UserWarning):
    """Advisory diagnostic about ignored options or dropped arguments."""

    kind = ""

    def __init__(self, name: Any, message: str, class_name: str = DEFAULT_CLASS_NAME):
        self.name = name
        self.class_name = class_name
        self.identifier = make_identifier(class_name, self.kind)
        super().__init__(f"{self.identifier}: {message}")


class UnknownOptionWarning(ArgListWarning):
    """Emitted when a control option is not recognized."""
    kind = UNKNOWN_OPTION


class UnrecognizedArgNameWarning(ArgListWarning):
    """Emitted when an argument name is not in validArgs."""
    kind = UNRECOGNIZED_ARG_NAME


def _caller_frame():
    """First frame outside this module."""
    frame = sys._getframe(1)
    while frame.f_back is not None and frame.f_code.co_filename == _HERE:
        frame = frame.f_back
    return frame


_HERE = _caller_frame.__code__.co_filename


def _emit(warning: ArgListWarning, on_warning: Optional[WarningHandler]) -> None:
    if on_warning is not None:
        on_warning(warning)
        return

    # Fresh registry so repeated calls report again
    frame = _caller_frame()
    warnings.warn_explicit(
        warning,
        type(warning),
        frame.f_code.co_filename,
        frame.f_lineno,
        module=frame.f_globals.get("__name__"),
        registry={},
        module_globals=frame.f_globals,
    )


def _parse_options(options: Sequence[Any], on_warning: Optional[WarningHandler]):
    if len(options) % 2 > 0:
        raise MismatchedArgListError(
            "All optional arguments must form name-value pairs",
            class_name=OPTIONS_NAMESPACE,
        )

    class_name = DEFAULT_CLASS_NAME
    valid_args: Sequence[str] = ()

    for i in range(0, len(options), 2):
        opt_name, opt_val = options[i], options[i + 1]
        if opt_name == "cName":
            class_name = opt_val
        elif opt_name == "validArgs":
            valid_args = opt_val
        else:
            _emit(
                UnknownOptionWarning(
                    opt_name,
                    f"Optional argument '{opt_name}' is not recognized "
                    "and has therefore been ignored.",
                    class_name=OPTIONS_NAMESPACE,
                ),
                on_warning,
            )

    # None means no filtering; a lone name is a one-entry whitelist
    if valid_args is None:
        valid_args = ()
    elif isinstance(valid_args, str):
        valid_args = (valid_args,)
    else:
        valid_args = tuple(valid_args)
    return class_name, valid_args


def to_struct(
    x: Sequence[Any],
    *options: Any,
    on_warning: Optional[WarningHandler] = None,
) -> Dict[str, Any]:
    """
    Convert a name-value argument list into a dict.

    Args:
        x: Alternating name/value tokens, e.g. ["Vnom", 380, "Type", "DC"]
        *options: Control options as name-value pairs:
            "cName"      namespace used in error identifiers (default "general")
            "validArgs"  accepted argument names; others are dropped with a
                         warning. Empty means no filtering.
        on_warning: Receives each ArgListWarning instead of warnings.warn

    Returns:
        A new dict of the surviving pairs. Duplicate names: last value wins.

    Raises:
        MismatchedArgListError: options or x have odd length
        InvalidArgNameError: a name in x is not a str
    """
    class_name, valid_args = _parse_options(options, on_warning)

    if len(x) % 2 > 0:
        raise MismatchedArgListError(
            "All arguments must form name-value pairs", class_name=class_name
        )

    names = list(x[0::2])
    values = list(x[1::2])

    for name in names:
        if not isinstance(name, str):
            raise InvalidArgNameError(
                f"Argument name {name!r} is not a string", class_name=class_name
            )

    if len(valid_args) > 0:
        accepted = set(valid_args)
        dropped = sorted(set(names) - accepted)

        kept = [(n, v) for n, v in zip(names, values) if n in accepted]
        names = [n for n, _ in kept]
        values = [v for _, v in kept]

        for name in dropped:
            _emit(
                UnrecognizedArgNameWarning(
                    name,
                    f"Argument '{name}' is not recognized "
                    "and has therefore been ignored.",
                    class_name=class_name,
                ),
                on_warning,
            )

    out: Dict[str, Any] = {}
    for name, value in zip(names, values):
        out[name] = value
    return out


def to_arg_list(record: Mapping[str, Any]) -> List[Any]:
    """Flatten a record back into an alternating name/value list."""
    out: List[Any] = []
    for name, value in record.items():
        if not isinstance(name, str):
            raise InvalidArgNameError(f"Argument name {name!r} is not a string")
        out.extend([name, value])
    return out


def parse_args(
    x: Sequence[Any],
    defaults: Mapping[str, Any],
    *options: Any,
    on_warning: Optional[WarningHandler] = None,
) -> Dict[str, Any]:
    """
    Overlay a name-value argument list onto a dict of defaults.

    Unless "validArgs" is given explicitly, the keys of `defaults` are the
    accepted argument names.
    """
    if "validArgs" not in options[0::2]:
        options = options + ("validArgs", list(defaults))

    result = dict(defaults)
    result.update(to_struct(x, *options, on_warning=on_warning))
    return result
