# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from pathlib import Path

from .configuration import ACS_FILTER, FilterConfiguration
from .exceptions import (
    DescriptorNotFoundError,
    DescriptorParseError,
    InvalidArgumentError,
    ParamRemoveError,
    ParamSetError,
    ParamsQueryError,
    PersistError,
    RemoveAllError,
)
from .xml import ETreeDocument, ETreeElement, FilePath, Namespace, PathExpression, document_namespace, parse, serialize, subelement

__all__ = 'FilterDescriptorEditor',  # noqa: COM818


log = logging.getLogger(__name__)


class FilterDescriptorEditor:
    """
    Edit the configuration of a servlet filter inside a web.xml descriptor.

    The editor manages a single filter, identified by the filter name in its
    configuration, together with the filter mapping that applies it to all
    the URLs of the application and the filter's initialization parameters.

    The descriptor is parsed when the editor is created and all the changes
    are made in memory. They are only written back to the descriptor file
    when save() is called, so discarding the editor without saving leaves
    the file untouched.

    Errors that occur while editing are logged using the editor's logger
    and raised as one of the DescriptorError subclasses, with the original
    error as their cause.
    """

    path: Path
    configuration: FilterConfiguration
    document: ETreeDocument
    namespace: Namespace | None
    logger: logging.Logger

    def __init__(self, path: FilePath, configuration: FilterConfiguration = ACS_FILTER, *, logger: logging.Logger | None = None) -> None:
        self.path = Path(path)
        self.configuration = configuration
        self.logger = logger if logger is not None else log

        if not self.path.exists():
            message = configuration.file_not_found.format(path=self.path)
            self.logger.error(message)
            raise DescriptorNotFoundError(message)

        try:
            self.document = parse(self.path)
        except Exception as exc:
            self.logger.exception('Failed to parse %s', self.path)
            raise DescriptorParseError(configuration.parse_error) from exc

        self.namespace = namespace = document_namespace(self.document)

        self._filter_xpath = PathExpression(configuration.filter_expression, namespace=namespace)
        self._filter_mapping_xpath = PathExpression(configuration.filter_mapping_expression, namespace=namespace)
        self._filter_params_xpath = PathExpression(configuration.filter_params_expression, namespace=namespace)
        self._init_param_xpath = PathExpression(configuration.init_param_expression, namespace=namespace)
        self._param_name_xpath = PathExpression(configuration.param_name_expression, namespace=namespace)
        self._param_value_xpath = PathExpression(configuration.param_value_expression, namespace=namespace)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({str(self.path)!r}, filter_name={self.configuration.filter_name!r})'

    @property
    def root(self) -> ETreeElement:
        return self.document.getroot()

    @property
    def has_filter(self) -> bool:
        return self._find_filter() is not None

    @property
    def has_filter_mapping(self) -> bool:
        return self._find_filter_mapping() is not None

    def set_param(self, name: str, value: str) -> None:
        """
        Add the name=value initialization parameter to the filter or update
        the value of the parameter if it already exists.

        The filter and its mapping are created first if they do not exist.
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError('The parameter name must be a non-empty string')
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError('The parameter value must be a non-empty string')

        config = self.configuration
        try:
            filter_element = self._find_filter()
            if filter_element is None:
                filter_element = self._create_filter()
            self._ensure_filter_mapping()

            init_param = self._find_init_param(name)
            if init_param is None:
                init_param = subelement(filter_element, config.init_param_tag, namespace=self.namespace)
                subelement(init_param, config.param_name_tag, namespace=self.namespace, text=name)
                subelement(init_param, config.param_value_tag, namespace=self.namespace, text=value)
                self.logger.debug('Added the %r parameter to the %s filter in %s', name, config.filter_name, self.path)
            else:
                param_value = self._param_value_xpath.first(init_param)
                if param_value is None:
                    param_value = subelement(init_param, config.param_value_tag, namespace=self.namespace)
                del param_value[:]  # the value replaces the whole content of the element
                param_value.text = value
                self.logger.debug('Updated the %r parameter of the %s filter in %s', name, config.filter_name, self.path)
        except Exception as exc:
            self.logger.exception('Failed to set the %r parameter of the %s filter', name, config.filter_name)
            raise ParamSetError(f'{config.param_error}{exc}') from exc

    def remove_param(self, name: str) -> None:
        """Remove the initialization parameter with the given name if it exists"""
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError('The parameter name must be a non-empty string')

        config = self.configuration
        try:
            init_param = self._find_init_param(name)
            if init_param is not None:
                self._detach(init_param)
                self.logger.debug('Removed the %r parameter from the %s filter in %s', name, config.filter_name, self.path)
        except Exception as exc:
            self.logger.exception('Failed to remove the %r parameter of the %s filter', name, config.filter_name)
            raise ParamRemoveError(f'{config.param_error}{exc}') from exc

    def get_param(self, name: str) -> str | None:
        """Return the value of the initialization parameter with the given name or None if it doesn't exist"""
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError('The parameter name must be a non-empty string')

        config = self.configuration
        try:
            init_param = self._find_init_param(name)
            return self._param_value_xpath.text(init_param) if init_param is not None else None
        except Exception as exc:
            self.logger.exception('Failed to read the %r parameter of the %s filter', name, config.filter_name)
            raise ParamsQueryError(f'{config.get_params_error}{exc}') from exc

    def get_params(self) -> dict[str, str]:
        """
        Return the initialization parameters of the filter as a name to value
        mapping. If the filter or its parameters are missing the mapping will
        be empty. If the same parameter name appears multiple times the value
        of the last one is used.
        """
        config = self.configuration
        try:
            init_params = self._filter_params_xpath.all(self.document, filter_name=config.filter_name)
            return {self._param_name_xpath.text(init_param): self._param_value_xpath.text(init_param) for init_param in init_params}
        except Exception as exc:
            self.logger.exception('Failed to read the parameters of the %s filter', config.filter_name)
            raise ParamsQueryError(f'{config.get_params_error}{exc}') from exc

    def remove_all(self) -> None:
        """Remove the filter and its mapping from the descriptor"""
        config = self.configuration
        try:
            filter_element = self._find_filter()
            if filter_element is not None:
                self._detach(filter_element)
                self.logger.debug('Removed the %s filter from %s', config.filter_name, self.path)
            filter_mapping = self._find_filter_mapping()
            if filter_mapping is not None:
                self._detach(filter_mapping)
                self.logger.debug('Removed the %s filter mapping from %s', config.filter_name, self.path)
        except Exception as exc:
            self.logger.exception('Failed to remove the %s filter', config.filter_name)
            raise RemoveAllError(f'{config.remove_error}{exc}') from exc

    def save(self) -> None:
        """Write the descriptor back to the file it was loaded from"""
        try:
            serialize(self.document, self.path)
        except Exception as exc:
            self.logger.exception('Failed to save %s', self.path)
            raise PersistError(f'{self.configuration.save_error}{exc}') from exc
        self.logger.debug('Saved %s', self.path)

    def _find_filter(self) -> ETreeElement | None:
        return self._filter_xpath.first(self.document, filter_name=self.configuration.filter_name)

    def _find_filter_mapping(self) -> ETreeElement | None:
        return self._filter_mapping_xpath.first(self.document, filter_name=self.configuration.filter_name)

    def _find_init_param(self, name: str) -> ETreeElement | None:
        return self._init_param_xpath.first(self.document, filter_name=self.configuration.filter_name, param_name=name)

    def _create_filter(self) -> ETreeElement:
        config = self.configuration
        filter_element = subelement(self.root, config.filter_tag, namespace=self.namespace)
        subelement(filter_element, config.filter_name_tag, namespace=self.namespace, text=config.filter_name)
        subelement(filter_element, config.filter_class_tag, namespace=self.namespace, text=config.filter_class)
        self.logger.debug('Created the %s filter in %s', config.filter_name, self.path)
        return filter_element

    def _ensure_filter_mapping(self) -> None:
        # failures are logged and not propagated to the caller
        config = self.configuration
        try:
            if self._find_filter_mapping() is None:
                filter_mapping = subelement(self.root, config.filter_mapping_tag, namespace=self.namespace)
                subelement(filter_mapping, config.filter_name_tag, namespace=self.namespace, text=config.filter_name)
                subelement(filter_mapping, config.url_pattern_tag, namespace=self.namespace, text=config.url_pattern)
                self.logger.debug('Created the %s filter mapping in %s', config.filter_name, self.path)
        except Exception:
            self.logger.exception('Failed to create the %s filter mapping', config.filter_name)

    @staticmethod
    def _detach(element: ETreeElement) -> None:
        parent = element.getparent()
        if parent is not None:
            parent.remove(element)
