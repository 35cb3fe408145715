# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:02:14
# @Author : Kariko Lin

from .reader import IniReader, InvalidArgument
from .events import EventRecorder, IniEvent, events_of
from .lines import LineResult, parse
from .model import IniDocument, IniDocumentBuilder, IniSection
from .parser import (
    IniParser,
    IniYamlParser,
    InvalidIniLine,
    InvalidYamlDocument
)
