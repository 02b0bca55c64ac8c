# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from dataclasses import dataclass

__all__ = 'ACS_FILTER', 'FilterConfiguration'


@dataclass(frozen=True, slots=True, kw_only=True)
class FilterConfiguration:
    """
    The constant table that describes the filter managed by an editor.

    The path expressions are templates where {ns} stands for the namespace
    prefix of the descriptor (see webfilter.xml.PathExpression). They are
    evaluated with the $filter_name variable bound to filter_name and, for
    the init-param expression, the $param_name variable bound to the name
    of the parameter.
    """

    filter_name: str
    filter_class: str
    url_pattern: str = '/*'

    filter_tag: str = 'filter'
    filter_name_tag: str = 'filter-name'
    filter_class_tag: str = 'filter-class'
    filter_mapping_tag: str = 'filter-mapping'
    url_pattern_tag: str = 'url-pattern'
    init_param_tag: str = 'init-param'
    param_name_tag: str = 'param-name'
    param_value_tag: str = 'param-value'

    filter_expression: str = '/*/{ns}filter[{ns}filter-name=$filter_name]'
    filter_mapping_expression: str = '/*/{ns}filter-mapping[{ns}filter-name=$filter_name]'
    filter_params_expression: str = '/*/{ns}filter[{ns}filter-name=$filter_name]/{ns}init-param'
    init_param_expression: str = '/*/{ns}filter[{ns}filter-name=$filter_name]/{ns}init-param[{ns}param-name=$param_name]'
    param_name_expression: str = 'string(./{ns}param-name)'
    param_value_expression: str = './{ns}param-value'

    file_not_found: str = '{path} does not exist'
    parse_error: str = 'Error occurred while parsing the web.xml file'
    param_error: str = 'Error occurred while updating the filter parameters: '
    get_params_error: str = 'Error occurred while reading the filter parameters: '
    remove_error: str = 'Error occurred while removing the filter configuration: '
    save_error: str = 'Error occurred while saving the web.xml file: '


ACS_FILTER = FilterConfiguration(
    filter_name='ACSFilter',
    filter_class='com.microsoftopentechnologies.acs.federation.ACSFederationAuthFilter',
)
