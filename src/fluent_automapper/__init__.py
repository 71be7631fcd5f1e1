"""Package initialization for fluent-automapper.

Re-exports the public API: the process-wide `automapper` engine, the `Profile`
and `TypeConverter` base classes, the built-in naming conventions and the
error types.
"""

from .configuration import CreateMapExpression, MemberOptions
from .converters import ResolutionContext, TypeConverter
from .curry import curried
from .engine import AutoMapper, automapper
from .errors import (
    AutoMapperError,
    DuplicateInstantiation,
    InvalidConfiguration,
    MappingNotFound,
    ProfileNotFound,
)
from .naming import (
    CamelCaseNamingConvention,
    NamingConvention,
    PascalCaseNamingConvention,
    SnakeCaseNamingConvention,
)
from .profile import Profile

__all__ = [
    "AutoMapper",
    "AutoMapperError",
    "CamelCaseNamingConvention",
    "CreateMapExpression",
    "DuplicateInstantiation",
    "InvalidConfiguration",
    "MappingNotFound",
    "MemberOptions",
    "NamingConvention",
    "PascalCaseNamingConvention",
    "Profile",
    "ProfileNotFound",
    "ResolutionContext",
    "SnakeCaseNamingConvention",
    "TypeConverter",
    "automapper",
    "curried",
]
