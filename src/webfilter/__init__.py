# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from .__info__ import __license__, __version__, __webpage__
from .configuration import ACS_FILTER, FilterConfiguration
from .editor import FilterDescriptorEditor
from .exceptions import (
    DescriptorError,
    DescriptorNotFoundError,
    DescriptorParseError,
    InvalidArgumentError,
    ParamRemoveError,
    ParamSetError,
    ParamsQueryError,
    PersistError,
    RemoveAllError,
)

__all__ = (  # noqa: RUF022
    'FilterDescriptorEditor',
    'FilterConfiguration',
    'ACS_FILTER',

    'DescriptorError',
    'DescriptorNotFoundError',
    'DescriptorParseError',
    'InvalidArgumentError',
    'ParamSetError',
    'ParamRemoveError',
    'ParamsQueryError',
    'RemoveAllError',
    'PersistError',

    '__version__',
    '__license__',
    '__webpage__',
)
