# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 20:26:40
# @Author : Kariko Lin

import logging

from .ini import (
    IniReader, InvalidArgument,
    EventRecorder, IniEvent, events_of,
    LineResult, parse,
    IniDocument, IniDocumentBuilder, IniSection,
    IniParser, IniYamlParser, InvalidIniLine, InvalidYamlDocument
)

__all__ = [
    'IniReader', 'InvalidArgument',
    'EventRecorder', 'IniEvent', 'events_of',
    'LineResult', 'parse',
    'IniDocument', 'IniDocumentBuilder', 'IniSection',
    'IniParser', 'IniYamlParser', 'InvalidIniLine', 'InvalidYamlDocument'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
