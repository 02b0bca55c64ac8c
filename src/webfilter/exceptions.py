# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later


__all__ = (  # noqa: RUF022
    'DescriptorError',
    'DescriptorNotFoundError',
    'DescriptorParseError',
    'InvalidArgumentError',
    'ParamSetError',
    'ParamRemoveError',
    'ParamsQueryError',
    'RemoveAllError',
    'PersistError',
)


class DescriptorError(Exception):
    """
    Base class for the errors raised while editing a deployment descriptor.

    Errors that wrap a lower level failure (a parser error, an I/O error or
    an error raised while traversing the document) keep it in the exception's
    ``__cause__`` attribute.

    """


class DescriptorNotFoundError(DescriptorError, FileNotFoundError):
    """Raised when the descriptor file does not exist."""


class DescriptorParseError(DescriptorError):
    """Raised when the descriptor file cannot be read or parsed."""


class InvalidArgumentError(DescriptorError, ValueError):
    """Raised when a parameter name or value is missing or empty."""


class ParamSetError(DescriptorError):
    """Raised when an initialization parameter cannot be added or updated."""


class ParamRemoveError(DescriptorError):
    """Raised when an initialization parameter cannot be removed."""


class ParamsQueryError(DescriptorError):
    """Raised when the initialization parameters cannot be read."""


class RemoveAllError(DescriptorError):
    """Raised when the filter and filter mapping blocks cannot be removed."""


class PersistError(DescriptorError):
    """Raised when the descriptor cannot be written back to disk."""
